"""Base class for interactive shape tools."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import structlog

from polysketch.core.geometry import in_circle, line_distance
from polysketch.core.llist import LinkedList
from polysketch.core.style import ToolStyle
from polysketch.core.types import ToolMode

if TYPE_CHECKING:
    from polysketch.core.models import Point
    from polysketch.core.render import RenderTarget

logger = structlog.get_logger(__name__)


class ShapeTool:
    """Stateful editor for a single shape.

    A tool starts in DRAW mode, where every pointer-down appends a vertex.
    Clicking the most recent vertex again, or reaching ``target_vertex_count``,
    finishes the shape and moves it to MODIFY mode. From then on the number
    of vertices is fixed, but a selected vertex can be dragged around.

    Vertices are owned by the tool. Selection is tracked by index only, never
    by holding on to a vertex object.

    Subclasses set ``tool_name`` and ``label`` and may override
    ``target_vertex_count`` and ``_close``. The base class itself is never
    registered as a tool.

    Attributes:
        vertices: The shape's vertices, in drawing order.
        mode: Current editing phase.
        selected: Whether the shape is selected in the host.
        selected_index: Index of the selected vertex, or None.
        preview_point: Cursor position shown as a rubber band while drawing.
        target: Render target the tool draws onto.
        style: Colors and interaction sizes.
    """

    tool_name: ClassVar[str]
    label: ClassVar[str]
    target_vertex_count: ClassVar[int | None] = None

    def __init__(self, target: RenderTarget, style: ToolStyle | None = None) -> None:
        """Initialize the tool in DRAW mode with no vertices.

        Args:
            target: Render target the tool draws onto.
            style: Colors and interaction sizes. Defaults to ``ToolStyle()``.
        """
        self.target = target
        self.style = style or ToolStyle()
        self.vertices: LinkedList[Point] = LinkedList()
        self.mode = ToolMode.DRAW
        self.preview_point: Point | None = None
        self.selected = False
        self.selected_index: int | None = None
        self._pointer_down = False
        self._dragging = False

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the shape."""
        return self.vertices.size()

    @property
    def is_dragging(self) -> bool:
        """Whether the pointer is held down and has moved since the press."""
        return self._pointer_down and self._dragging

    @property
    def is_finished(self) -> bool:
        """Whether the shape has left DRAW mode."""
        return self.mode == ToolMode.MODIFY

    def points(self) -> tuple[Point, ...]:
        """Return copies of the vertices."""
        return tuple(vertex.copy() for vertex in self.vertices)

    def select(self, select_me: bool) -> None:
        """Set the selection state of the shape.

        Deselecting also forgets the selected vertex and the preview point.

        Args:
            select_me: True to select the shape.
        """
        self.selected = select_me
        if not select_me:
            self.selected_index = None
            self.preview_point = None

    def hit_test(self, p: Point) -> bool:
        """Check whether ``p`` is within the hit tolerance of any edge.

        Args:
            p: The point to test.

        Returns:
            True if ``p`` is close enough to one of the edges.
        """
        tolerance = self.style.hit_tolerance
        previous: Point | None = None
        for vertex in self.vertices:
            if previous is not None and line_distance(p, previous, vertex) < tolerance:
                return True
            previous = vertex
        return False

    def vertex_at(self, p: Point) -> int | None:
        """Return the index of the first vertex whose interaction circle holds ``p``."""
        for index, vertex in enumerate(self.vertices):
            if in_circle(p, vertex, self.style.point_radius):
                return index
        return None

    def on_pointer_down(self, p: Point) -> bool:
        """Handle a pointer press.

        Args:
            p: Where the pointer was pressed.

        Returns:
            False when this press finished the shape, True otherwise.
        """
        self._pointer_down = True
        self.selected_index = self.vertex_at(p)

        if self.mode != ToolMode.DRAW:
            return True

        if self.selected_index is not None and self.selected_index == self.vertex_count - 1:
            self._finalize()
            return False

        self.vertices.append(p.copy())
        if self.target_vertex_count is not None and self.vertex_count >= self.target_vertex_count:
            self._finalize()
            return False
        return True

    def on_pointer_move(self, p: Point) -> bool:
        """Handle pointer movement with no button held.

        Args:
            p: Current pointer location.

        Returns:
            False if the shape has no vertices yet, True otherwise.
        """
        if self.vertex_count == 0:
            return False
        if self.mode == ToolMode.DRAW:
            self.preview_point = p.copy()
        return True

    def on_pointer_drag(self, p: Point) -> bool:
        """Handle pointer movement with the button held.

        In MODIFY mode the selected vertex follows the pointer.

        Args:
            p: Current pointer location.

        Returns:
            Always True.
        """
        self._dragging = True
        index = self.selected_index
        if self.mode == ToolMode.MODIFY and index is not None and 0 <= index < self.vertex_count:
            self.vertices.get(index).move_to(p)
        return True

    def on_pointer_up(self, p: Point) -> bool:  # noqa: ARG002
        """Handle a pointer release.

        Returns:
            Always True.
        """
        if self.is_dragging and self.selected_index is not None and self.mode == ToolMode.MODIFY:
            logger.debug("Vertex moved", tool=self.tool_name, index=self.selected_index)
        self._pointer_down = self._dragging = False
        return True

    def render(self) -> None:
        """Draw the shape's edges, and its widgets when selected."""
        if self.vertex_count == 0:
            return

        self.target.set_stroke_color(self.style.stroke_color)
        self.target.set_line_width(self.style.line_width)

        previous: Point | None = None
        for vertex in self.vertices:
            if previous is not None:
                self.target.stroke_line(previous.x, previous.y, vertex.x, vertex.y)
            previous = vertex

        if self.selected:
            self.render_widgets()

    def render_widgets(self) -> None:
        """Draw the vertex markers, the rubber band and the selected vertex.

        The selected vertex is only highlighted in MODIFY mode. While drawing,
        a press on an earlier vertex still records ``selected_index`` but the
        vertex cannot be dragged yet.
        """
        if not self.selected:
            return

        self.target.set_fill_color(self.style.marker_color)
        for vertex in self.vertices:
            self._marker(vertex)

        if self.preview_point is not None and self.vertex_count > 0:
            last = self.vertices.get(self.vertex_count - 1)
            self.target.stroke_line(last.x, last.y, self.preview_point.x, self.preview_point.y)
            self._marker(self.preview_point)

        index = self.selected_index
        if self.mode == ToolMode.MODIFY and index is not None and 0 <= index < self.vertex_count:
            self.target.set_fill_color(self.style.selected_color)
            self._marker(self.vertices.get(index))

    def _marker(self, p: Point) -> None:
        radius = self.style.point_radius
        self.target.fill_oval(p.x - radius, p.y - radius, radius * 2, radius * 2)

    def _finalize(self) -> None:
        """Close the shape and switch to MODIFY mode."""
        self._close()
        self.mode = ToolMode.MODIFY
        self.preview_point = None
        logger.debug("Shape finished", tool=self.tool_name, vertices=self.vertex_count)

    def _close(self) -> None:
        """Hook for variants that add closing geometry when finished."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mode={self.mode.value}, vertices={self.vertices})"
