"""Structured logging for polysketch.

Holds the structlog setup shared by the app and the CLI, and the request
middleware that ties HTTP requests to the workspace state.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from litestar.types import ASGIApp, Message, Receive, Scope, Send

    from polysketch.services.workspace import DrawingWorkspace


def configure_logging(*, debug: bool = False, json_logs: bool = False, cache_loggers: bool = True) -> None:
    """Configure structured logging for the application.

    Args:
        debug: Enable debug level logging.
        json_logs: Output logs as JSON (for production).
        cache_loggers: Bind each logger to its output stream on first use.
            Short-lived CLI runs, whose stdout may be swapped, turn this off.
    """
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.extend(
            [
                structlog.processors.ExceptionPrettyPrinter(),
                structlog.dev.ConsoleRenderer(colors=True),
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )


def _correlation_id(scope: Scope) -> str:
    headers = dict(scope.get("headers", []))
    return (
        headers.get(b"x-correlation-id", b"").decode()
        or headers.get(b"x-request-id", b"").decode()
        or str(uuid.uuid4())
    )


class WorkspaceRequestMiddleware:
    """Middleware that correlates and logs each request against the editor state.

    The correlation ID is taken from the X-Correlation-ID or X-Request-ID
    header, or generated. It is stored in the request state, echoed in the
    response headers and bound to the structlog context while the request
    runs, so the workspace's own events carry it too.

    When the request completes one line is logged with the status, the
    duration and a snapshot of the workspace: the active tool, the number of
    shapes and the tool of the selected shape.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        workspace: DrawingWorkspace | None = None,
        exclude_paths: set[str] | None = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application.
            workspace: Workspace whose state is added to each request line.
            exclude_paths: Paths that are correlated but not logged.
        """
        self.app = app
        self.workspace = workspace
        self.exclude_paths = exclude_paths or {"/favicon.ico"}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Correlate the request, run it and log the outcome."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = _correlation_id(scope)
        scope.setdefault("state", {})["correlation_id"] = correlation_id
        start_time = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                message["headers"] = [*message.get("headers", []), (b"x-correlation-id", correlation_id.encode())]
            await send(message)

        path = scope.get("path", "")
        with structlog.contextvars.bound_contextvars(
            correlation_id=correlation_id,
            method=scope.get("method", ""),
            path=path,
        ):
            try:
                await self.app(scope, receive, send_wrapper)
            finally:
                if path not in self.exclude_paths:
                    self._log_completed(status_code, (time.perf_counter() - start_time) * 1000)

    def workspace_state(self) -> dict[str, Any]:
        """Return the workspace fields added to each request line."""
        if self.workspace is None:
            return {}
        selected = self.workspace.selected_shape
        return {
            "active_tool": self.workspace.active_tool,
            "shapes": len(self.workspace.shapes),
            "selected_tool": selected.tool_name if selected is not None else None,
        }

    def _log_completed(self, status_code: int, duration_ms: float) -> None:
        logger = structlog.get_logger(__name__)
        if status_code >= 500:
            log_method = logger.error
        elif status_code >= 400:
            log_method = logger.warning
        else:
            log_method = logger.info
        log_method(
            "Request completed",
            status_code=status_code,
            duration_ms=round(duration_ms, 2),
            **self.workspace_state(),
        )
