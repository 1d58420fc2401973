"""Main Litestar application for polysketch.

This module provides the application factory and a configured app instance
for running polysketch as a standalone service.
"""

from __future__ import annotations

from litestar import Litestar
from litestar.openapi import OpenAPIConfig

from polysketch import __version__
from polysketch.cli import PolysketchCLIPlugin
from polysketch.config import EditorConfig
from polysketch.core.error_handling import get_exception_handlers
from polysketch.core.logging import configure_logging
from polysketch.plugin import PolysketchConfig, PolysketchPlugin


def create_app(*, editor: EditorConfig | None = None, api_path: str = "/api") -> Litestar:
    """Create and configure the Litestar application.

    Args:
        editor: Editor settings. Defaults to values read from the environment.
        api_path: Base path for the API routes.

    Returns:
        Configured Litestar application instance.
    """
    editor = editor or EditorConfig()
    configure_logging(debug=editor.debug, json_logs=editor.json_logs)

    return Litestar(
        plugins=[PolysketchPlugin(PolysketchConfig(editor=editor, api_path=api_path)), PolysketchCLIPlugin()],
        debug=editor.debug,
        exception_handlers=get_exception_handlers(),
        openapi_config=OpenAPIConfig(
            title="polysketch API",
            version=__version__,
            description="Interactive polyline and triangle editing surface",
            path="/schema",
            use_handler_docstrings=True,
        ),
    )


# Default application instance for uvicorn
app = create_app()
