"""Litestar controllers for polysketch API endpoints."""

from __future__ import annotations

from typing import Annotated, ClassVar

from litestar import Controller, delete, get, post, put
from litestar.params import Parameter
from litestar.response import Response
from litestar.status_codes import HTTP_200_OK, HTTP_204_NO_CONTENT

from polysketch.exceptions import NoSelectionError
from polysketch.services.export import MAX_EXPORT_SCALE, ExportService
from polysketch.services.workspace import DrawingWorkspace
from polysketch.web.dto import (
    PointerEventDTO,
    PointerEventResultDTO,
    RenderDTO,
    SetToolDTO,
    ToolInfoDTO,
    WorkspaceDTO,
    workspace_to_dto,
)


class WorkspaceController(Controller):
    """Controller for the drawing workspace.

    Handlers are synchronous and run on the event loop, so pointer events are
    applied strictly one at a time.
    """

    path = "/workspace"
    tags: ClassVar[list[str]] = ["Workspace"]

    @get("/", sync_to_thread=False)
    def get_workspace(self, workspace: DrawingWorkspace) -> WorkspaceDTO:
        """Get the current editing state.

        Args:
            workspace: The drawing workspace (injected).

        Returns:
            The active tool and a summary of every shape.
        """
        return workspace_to_dto(workspace)

    @get("/tools", sync_to_thread=False)
    def list_tools(self, workspace: DrawingWorkspace) -> list[ToolInfoDTO]:
        """List the registered tools.

        Args:
            workspace: The drawing workspace (injected).

        Returns:
            One entry per registered tool, sorted by name.
        """
        registry = workspace.registry
        return [
            ToolInfoDTO(
                name=name,
                label=getattr(registry.factory(name), "label", name.title()),
                active=name == workspace.active_tool,
            )
            for name in registry.names()
        ]

    @put("/tool", sync_to_thread=False)
    def set_tool(self, data: SetToolDTO, workspace: DrawingWorkspace) -> WorkspaceDTO:
        """Choose the tool used for new shapes.

        Args:
            data: The tool name, or null to deactivate.
            workspace: The drawing workspace (injected).

        Returns:
            The workspace state.

        Raises:
            UnknownToolError: If the tool is not registered.
        """
        workspace.set_active_tool(data.name)
        return workspace_to_dto(workspace)

    @post("/tool/{name:str}/toggle", sync_to_thread=False, status_code=HTTP_200_OK)
    def toggle_tool(self, name: str, workspace: DrawingWorkspace) -> WorkspaceDTO:
        """Toggle a tool on or off, as a palette button does.

        Args:
            name: The tool name.
            workspace: The drawing workspace (injected).

        Returns:
            The workspace state.

        Raises:
            UnknownToolError: If the tool is not registered.
        """
        workspace.toggle_tool(name)
        return workspace_to_dto(workspace)

    @post("/events", sync_to_thread=False, status_code=HTTP_200_OK)
    def dispatch_event(self, data: PointerEventDTO, workspace: DrawingWorkspace) -> PointerEventResultDTO:
        """Dispatch a pointer event to the workspace.

        Args:
            data: The event kind and location.
            workspace: The drawing workspace (injected).

        Returns:
            Whether the event was consumed, and the workspace state.

        Raises:
            InvalidEventError: If the event kind is not recognised.
        """
        consumed = workspace.dispatch(data.kind, data.point())
        return PointerEventResultDTO(consumed=consumed, workspace=workspace_to_dto(workspace))

    @get("/render", sync_to_thread=False)
    def render(self, workspace: DrawingWorkspace) -> RenderDTO:
        """Render every shape and return the draw operations.

        Args:
            workspace: The drawing workspace (injected).

        Returns:
            The display list as JSON operations.
        """
        display_list = workspace.render()
        return RenderDTO(width=workspace.width, height=workspace.height, ops=display_list.to_list())

    @get("/export/svg", sync_to_thread=False)
    def export_svg(self, workspace: DrawingWorkspace, export_service: ExportService) -> Response[str]:
        """Export the rendered workspace as SVG.

        Args:
            workspace: The drawing workspace (injected).
            export_service: The export service instance (injected).

        Returns:
            SVG content as a response with appropriate content type.
        """
        svg_content = export_service.to_svg(workspace.render(), workspace.width, workspace.height)
        return Response(
            content=svg_content,
            media_type="image/svg+xml",
            headers={"Content-Disposition": 'inline; filename="workspace.svg"'},
        )

    @get("/export/png", sync_to_thread=False)
    def export_png(
        self,
        workspace: DrawingWorkspace,
        export_service: ExportService,
        scale: Annotated[
            float,
            Parameter(gt=0, le=MAX_EXPORT_SCALE, description="Scale factor for the output image"),
        ] = 1.0,
    ) -> Response[bytes]:
        """Export the rendered workspace as PNG.

        Args:
            workspace: The drawing workspace (injected).
            export_service: The export service instance (injected).
            scale: Scale factor for the output image, in (0, 8] (default: 1.0).

        Returns:
            PNG image as a response with appropriate content type.
        """
        png_content = export_service.to_png(workspace.render(), workspace.width, workspace.height, scale=scale)
        return Response(
            content=png_content,
            media_type="image/png",
            headers={"Content-Disposition": 'inline; filename="workspace.png"'},
        )

    @delete("/selected", sync_to_thread=False, status_code=HTTP_204_NO_CONTENT)
    def delete_selected(self, workspace: DrawingWorkspace) -> None:
        """Delete the selected shape.

        Args:
            workspace: The drawing workspace (injected).

        Raises:
            NoSelectionError: If no shape is selected.
        """
        if not workspace.delete_selected():
            raise NoSelectionError

    @delete("/", sync_to_thread=False, status_code=HTTP_204_NO_CONTENT)
    def clear(self, workspace: DrawingWorkspace) -> None:
        """Remove every shape from the workspace.

        Args:
            workspace: The drawing workspace (injected).
        """
        workspace.clear()
