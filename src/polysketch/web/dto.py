"""Data Transfer Objects (DTOs) for the polysketch API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from polysketch.core.models import Point

if TYPE_CHECKING:
    from polysketch.services.workspace import DrawingWorkspace


@dataclass
class SetToolDTO:
    """DTO for choosing the tool used for new shapes.

    Attributes:
        name: Registered tool name, or None to stop creating shapes.
    """

    name: str | None = None


@dataclass
class PointerEventDTO:
    """DTO for a pointer event.

    Attributes:
        kind: One of ``down``, ``move``, ``drag`` or ``up``.
        x: X-coordinate of the pointer.
        y: Y-coordinate of the pointer.
    """

    kind: str
    x: float
    y: float

    def point(self) -> Point:
        """Return the event location as a domain point."""
        return Point(x=self.x, y=self.y)


@dataclass
class ShapeSummaryDTO:
    """DTO summarising one shape.

    Attributes:
        tool: Name of the tool that drew the shape.
        mode: ``draw`` or ``modify``.
        selected: Whether the shape is selected.
        vertex_count: Number of vertices.
        selected_index: Index of the selected vertex, if any.
    """

    tool: str
    mode: str
    selected: bool
    vertex_count: int
    selected_index: int | None = None


@dataclass
class WorkspaceDTO:
    """DTO for the workspace state.

    Attributes:
        active_tool: Tool used for new shapes.
        width: Surface width in pixels.
        height: Surface height in pixels.
        shapes: One summary per shape, oldest first.
    """

    active_tool: str | None
    width: int
    height: int
    shapes: list[ShapeSummaryDTO] = field(default_factory=list)


@dataclass
class PointerEventResultDTO:
    """DTO returned after dispatching a pointer event.

    Attributes:
        consumed: Whether the receiving shape consumed the event.
        workspace: The workspace state after the event.
    """

    consumed: bool
    workspace: WorkspaceDTO


@dataclass
class ToolInfoDTO:
    """DTO describing a registered tool.

    Attributes:
        name: Lowercase tool name.
        label: Button text for the tool.
        active: Whether this is the active tool.
    """

    name: str
    label: str
    active: bool = False


@dataclass
class RenderDTO:
    """DTO carrying a rendered display list.

    Attributes:
        width: Surface width in pixels.
        height: Surface height in pixels.
        ops: Draw operations in order.
    """

    width: int
    height: int
    ops: list[dict[str, Any]] = field(default_factory=list)


def workspace_to_dto(workspace: DrawingWorkspace) -> WorkspaceDTO:
    """Convert a workspace to its response DTO."""
    state = workspace.describe()
    return WorkspaceDTO(
        active_tool=state["active_tool"],
        width=state["width"],
        height=state["height"],
        shapes=[ShapeSummaryDTO(**shape) for shape in state["shapes"]],
    )
