"""Litestar plugin for polysketch integration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from litestar.di import Provide
from litestar.middleware import DefineMiddleware
from litestar.plugins import InitPluginProtocol

from polysketch.config import EditorConfig
from polysketch.core.error_handling import no_selection_handler, polysketch_error_handler, unknown_tool_handler
from polysketch.core.logging import WorkspaceRequestMiddleware
from polysketch.exceptions import NoSelectionError, PolysketchError, UnknownToolError
from polysketch.services.export import ExportService
from polysketch.services.workspace import DrawingWorkspace
from polysketch.web.router import create_router

if TYPE_CHECKING:
    from litestar.config.app import AppConfig

    from polysketch.tools.registry import ToolRegistry


@dataclass
class PolysketchConfig:
    """Configuration for the polysketch plugin.

    Attributes:
        registry: Tool registry for the workspace. If None, the built-in
            tools are registered.
        editor: Interaction sizes and surface dimensions.
        enable_api: Whether to mount the REST API routes. Defaults to True.
        api_path: Base path for mounting API routes. Defaults to "/api".
        dependency_key: Dependency injection key for the DrawingWorkspace.
            Defaults to "workspace".
        log_requests: Whether to correlate and log each request together
            with the workspace state. Defaults to True.

    Example:
        >>> config = PolysketchConfig(api_path="/api/v1", editor=EditorConfig(hit_tolerance=8))
    """

    registry: ToolRegistry | None = None
    editor: EditorConfig = field(default_factory=EditorConfig)
    enable_api: bool = True
    api_path: str = "/api"
    dependency_key: str = "workspace"
    log_requests: bool = True


class PolysketchPlugin(InitPluginProtocol):
    """Litestar plugin for polysketch integration.

    The plugin creates a single DrawingWorkspace for the application,
    registers it and the ExportService for dependency injection, mounts the
    workspace routes, installs handlers for editor errors and adds the
    request middleware that logs each request with the workspace state.

    Example:
        >>> from litestar import Litestar
        >>> from polysketch import PolysketchPlugin, PolysketchConfig
        >>>
        >>> app = Litestar(plugins=[PolysketchPlugin(PolysketchConfig())])

    Attributes:
        _config: The plugin configuration.
        _workspace: The workspace (None until on_app_init).
        _export_service: The export service (None until on_app_init).
    """

    def __init__(self, config: PolysketchConfig | None = None) -> None:
        """Initialize the plugin with optional configuration.

        Args:
            config: Plugin configuration. If None, PolysketchConfig with
                default values will be used.
        """
        self._config = config or PolysketchConfig()
        self._workspace: DrawingWorkspace | None = None
        self._export_service: ExportService | None = None

    @property
    def workspace(self) -> DrawingWorkspace | None:
        """The workspace created during app initialisation."""
        return self._workspace

    def on_app_init(self, app_config: AppConfig) -> AppConfig:
        """Initialize the plugin during application startup.

        Args:
            app_config: The Litestar application configuration object.

        Returns:
            The modified application configuration.
        """
        editor = self._config.editor
        self._workspace = DrawingWorkspace(
            registry=self._config.registry,
            style=editor.tool_style(),
            width=editor.canvas_width,
            height=editor.canvas_height,
        )
        self._export_service = ExportService()

        def provide_workspace() -> DrawingWorkspace:
            """Dependency provider for DrawingWorkspace.

            Returns:
                The initialized DrawingWorkspace instance.
            """
            if self._workspace is None:
                msg = "Workspace not initialized"
                raise RuntimeError(msg)
            return self._workspace

        def provide_export_service() -> ExportService:
            """Dependency provider for ExportService.

            Returns:
                The initialized ExportService instance.
            """
            if self._export_service is None:
                msg = "Export service not initialized"
                raise RuntimeError(msg)
            return self._export_service

        app_config.dependencies[self._config.dependency_key] = Provide(
            provide_workspace,
            sync_to_thread=False,
        )
        app_config.dependencies["export_service"] = Provide(
            provide_export_service,
            sync_to_thread=False,
        )

        if self._config.log_requests:
            app_config.middleware.append(DefineMiddleware(WorkspaceRequestMiddleware, workspace=self._workspace))

        app_config.exception_handlers.setdefault(UnknownToolError, unknown_tool_handler)
        app_config.exception_handlers.setdefault(NoSelectionError, no_selection_handler)
        app_config.exception_handlers.setdefault(PolysketchError, polysketch_error_handler)

        if self._config.enable_api:
            app_config.route_handlers.append(create_router(path=self._config.api_path))

        return app_config
