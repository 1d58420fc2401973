"""Drawing workspace hosting the shapes on one surface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from polysketch.core.render import DisplayList
from polysketch.core.types import PointerEventKind, ToolMode
from polysketch.exceptions import InvalidEventError, UnknownToolError
from polysketch.tools.registry import default_registry

if TYPE_CHECKING:
    from polysketch.core.models import Point
    from polysketch.core.style import ToolStyle
    from polysketch.tools.base import ShapeTool
    from polysketch.tools.registry import ToolRegistry

logger = structlog.get_logger(__name__)


class DrawingWorkspace:
    """Owns the shapes on a surface and routes pointer events to them.

    At most one shape is selected at a time; that shape is the one receiving
    pointer events. Every shape is bound to the workspace's display list, which
    ``render`` rebuilds from scratch on each call.

    Attributes:
        registry: Tool factories available to the workspace.
        style: Style passed to every new tool.
        width: Surface width in pixels.
        height: Surface height in pixels.
        display_list: The shared render target.
    """

    def __init__(
        self,
        registry: ToolRegistry | None = None,
        style: ToolStyle | None = None,
        width: int = 800,
        height: int = 600,
    ) -> None:
        """Initialize an empty workspace.

        Args:
            registry: Tool registry. Defaults to the built-in tools.
            style: Style passed to every new tool.
            width: Surface width in pixels.
            height: Surface height in pixels.
        """
        self.registry = registry if registry is not None else default_registry()
        self.style = style
        self.width = width
        self.height = height
        self.display_list = DisplayList()
        self._shapes: list[ShapeTool] = []
        self._current: ShapeTool | None = None
        self._active_tool: str | None = None

    @property
    def shapes(self) -> tuple[ShapeTool, ...]:
        """All shapes, oldest first."""
        return tuple(self._shapes)

    @property
    def selected_shape(self) -> ShapeTool | None:
        """The shape currently receiving pointer events."""
        return self._current

    @property
    def active_tool(self) -> str | None:
        """Name of the tool used for new shapes, if any."""
        return self._active_tool

    def set_active_tool(self, name: str | None) -> None:
        """Set the tool used for new shapes.

        Args:
            name: Registered tool name, or None to stop creating shapes.

        Raises:
            UnknownToolError: If ``name`` is not registered.
        """
        if name is not None and name not in self.registry:
            raise UnknownToolError(name)
        self._active_tool = name
        logger.info("Active tool changed", tool=name)

    def toggle_tool(self, name: str) -> str | None:
        """Activate ``name``, or deactivate it if it is already active.

        Returns:
            The active tool after the toggle.

        Raises:
            UnknownToolError: If ``name`` is not registered.
        """
        self.set_active_tool(None if self._active_tool == name else name)
        return self._active_tool

    def pointer_down(self, p: Point) -> bool:
        """Route a pointer press.

        An unfinished shape keeps receiving presses until it is finished. A
        finished shape stays selected so it can be edited straight away.

        Args:
            p: Where the pointer was pressed.

        Returns:
            Whether the receiving shape consumed the event.
        """
        current = self._current
        if current is not None and current.mode == ToolMode.DRAW:
            consumed = current.on_pointer_down(p)
            if not consumed:
                logger.info("Shape finished", tool=current.tool_name, vertices=current.vertex_count)
            return consumed

        if current is not None and current.vertex_at(p) is not None:
            return current.on_pointer_down(p)

        for shape in reversed(self._shapes):
            if shape.hit_test(p):
                self._focus(shape)
                return shape.on_pointer_down(p)

        if self._active_tool is not None:
            shape = self.registry.create(self._active_tool, self.display_list, self.style)
            self._shapes.append(shape)
            self._focus(shape)
            logger.info("Shape created", tool=self._active_tool, shapes=len(self._shapes))
            return shape.on_pointer_down(p)

        self._focus(None)
        return False

    def pointer_move(self, p: Point) -> bool:
        """Route pointer movement to the selected shape."""
        if self._current is None:
            return False
        return self._current.on_pointer_move(p)

    def pointer_drag(self, p: Point) -> bool:
        """Route a drag to the selected shape."""
        if self._current is None:
            return False
        return self._current.on_pointer_drag(p)

    def pointer_up(self, p: Point) -> bool:
        """Route a pointer release to the selected shape."""
        if self._current is None:
            return False
        return self._current.on_pointer_up(p)

    def dispatch(self, kind: PointerEventKind | str, p: Point) -> bool:
        """Route a pointer event by kind.

        Args:
            kind: One of ``down``, ``move``, ``drag`` or ``up``.
            p: Event location.

        Returns:
            Whether the event was consumed.

        Raises:
            InvalidEventError: If ``kind`` is not a pointer event kind.
        """
        try:
            kind = PointerEventKind(kind)
        except ValueError:
            raise InvalidEventError(str(kind)) from None

        handlers = {
            PointerEventKind.DOWN: self.pointer_down,
            PointerEventKind.MOVE: self.pointer_move,
            PointerEventKind.DRAG: self.pointer_drag,
            PointerEventKind.UP: self.pointer_up,
        }
        return handlers[kind](p)

    def deselect(self) -> None:
        """Deselect the selected shape, if any."""
        self._focus(None)

    def delete_selected(self) -> bool:
        """Remove the selected shape.

        Returns:
            True if a shape was removed, False if nothing was selected.
        """
        if self._current is None:
            return False
        self._shapes.remove(self._current)
        logger.info("Shape deleted", tool=self._current.tool_name, shapes=len(self._shapes))
        self._current = None
        return True

    def clear(self) -> None:
        """Remove every shape."""
        self._shapes.clear()
        self._current = None
        self.display_list.clear()
        logger.info("Workspace cleared")

    def render(self) -> DisplayList:
        """Redraw every shape, oldest first, onto the display list.

        Returns:
            The refreshed display list.
        """
        self.display_list.clear()
        for shape in self._shapes:
            shape.render()
        return self.display_list

    def describe(self) -> dict[str, Any]:
        """Summarise the editing state.

        Returns:
            Dictionary with the active tool and one entry per shape.
        """
        return {
            "active_tool": self._active_tool,
            "width": self.width,
            "height": self.height,
            "shapes": [
                {
                    "tool": shape.tool_name,
                    "mode": shape.mode.value,
                    "selected": shape.selected,
                    "vertex_count": shape.vertex_count,
                    "selected_index": shape.selected_index,
                }
                for shape in self._shapes
            ],
        }

    def _focus(self, shape: ShapeTool | None) -> None:
        if self._current is not None and self._current is not shape:
            self._current.select(False)
        self._current = shape
        if shape is not None:
            shape.select(True)
