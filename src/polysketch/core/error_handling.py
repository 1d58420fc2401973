"""Error handling and exception handlers for polysketch.

Provides structured JSON error responses with correlation IDs and proper HTTP
status codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog
from litestar import Response
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

if TYPE_CHECKING:
    from litestar import Request
    from litestar.exceptions import HTTPException

logger = structlog.get_logger(__name__)


@dataclass
class ErrorResponse:
    """Structured error response format."""

    status: str = "error"
    message: str = ""
    code: str = "internal_error"
    correlation_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON response."""
        result: dict[str, Any] = {
            "status": self.status,
            "message": self.message,
            "code": self.code,
        }
        if self.correlation_id:
            result["correlation_id"] = self.correlation_id
        return result


def get_correlation_id(request: Request) -> str | None:
    """Extract correlation ID from request state or headers."""
    correlation_id = request.scope.get("state", {}).get("correlation_id")
    if correlation_id:
        return correlation_id
    return request.headers.get("X-Correlation-ID") or request.headers.get("X-Request-ID")


def _error(request: Request, message: str, code: str, status_code: int) -> Response[dict[str, Any]]:
    error_response = ErrorResponse(
        message=message,
        code=code,
        correlation_id=get_correlation_id(request),
    )
    return Response(
        content=error_response.to_dict(),
        status_code=status_code,
        media_type="application/json",
    )


def http_exception_handler(request: Request, exc: HTTPException) -> Response[dict[str, Any]]:
    """Handle HTTP exceptions raised by Litestar itself (validation, routing)."""
    code_map = {
        400: "bad_request",
        404: "not_found",
        405: "method_not_allowed",
        422: "validation_error",
        500: "internal_error",
    }
    error_code = code_map.get(exc.status_code, "error")
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)

    log_level = "warning" if exc.status_code < 500 else "error"
    getattr(logger, log_level)(
        "HTTP exception",
        path=request.url.path,
        method=request.method,
        status_code=exc.status_code,
        error_code=error_code,
    )
    return _error(request, message, error_code, exc.status_code)


def unknown_tool_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle UnknownToolError exceptions."""
    logger.warning("Unknown tool", tool=getattr(exc, "name", "unknown"), path=request.url.path)
    return _error(request, str(exc), "tool_not_found", HTTP_404_NOT_FOUND)


def no_selection_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle NoSelectionError exceptions."""
    logger.warning("Nothing selected", path=request.url.path)
    return _error(request, str(exc), "no_selection", HTTP_404_NOT_FOUND)


def polysketch_error_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle any other PolysketchError as a bad request."""
    logger.warning("Editor error", error=str(exc), path=request.url.path)
    return _error(request, str(exc), "editor_error", HTTP_400_BAD_REQUEST)


def generic_exception_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle unexpected exceptions with a generic error response.

    Logs the full exception but returns a safe message to the client.
    """
    logger.exception(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        exc_info=exc,
    )
    return _error(
        request,
        "An unexpected error occurred. Please try again later.",
        "internal_error",
        HTTP_500_INTERNAL_SERVER_ERROR,
    )


def get_exception_handlers() -> dict:
    """Get all exception handlers for the application.

    Returns:
        Dictionary mapping exception types to handler functions.
    """
    from litestar.exceptions import HTTPException

    from polysketch.exceptions import NoSelectionError, PolysketchError, UnknownToolError

    return {
        HTTPException: http_exception_handler,
        UnknownToolError: unknown_tool_handler,
        NoSelectionError: no_selection_handler,
        PolysketchError: polysketch_error_handler,
        Exception: generic_exception_handler,
    }
