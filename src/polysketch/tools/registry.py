"""Static registry mapping tool names to factories."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from polysketch.exceptions import DuplicateToolError, UnknownToolError
from polysketch.tools.polyline import PolylineTool
from polysketch.tools.triangle import TriangleTool

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from polysketch.core.render import RenderTarget
    from polysketch.core.style import ToolStyle
    from polysketch.tools.base import ShapeTool

    ToolFactory = Callable[[RenderTarget, ToolStyle | None], ShapeTool]

logger = structlog.get_logger(__name__)


class ToolRegistry:
    """Maps lowercase tool names to factories that build new tools.

    Tools are registered with explicit calls at start-up.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register("line", PolylineTool)
        >>> registry.names()
        ['line']
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._factories: dict[str, ToolFactory] = {}

    def register(self, name: str, factory: ToolFactory) -> None:
        """Register a factory under ``name``.

        Args:
            name: Lowercase tool name.
            factory: Callable taking a render target and an optional style.

        Raises:
            DuplicateToolError: If the name is already registered.
        """
        if name in self._factories:
            raise DuplicateToolError(name)
        self._factories[name] = factory
        logger.debug("Tool registered", tool=name)

    def create(self, name: str, target: RenderTarget, style: ToolStyle | None = None) -> ShapeTool:
        """Build a new tool bound to ``target``.

        Args:
            name: Registered tool name.
            target: Render target for the new tool.
            style: Optional style for the new tool.

        Returns:
            A fresh tool in DRAW mode.

        Raises:
            UnknownToolError: If no tool is registered under ``name``.
        """
        try:
            factory = self._factories[name]
        except KeyError:
            raise UnknownToolError(name) from None
        return factory(target, style)

    def factory(self, name: str) -> ToolFactory:
        """Return the factory registered under ``name``.

        Raises:
            UnknownToolError: If no tool is registered under ``name``.
        """
        if name not in self._factories:
            raise UnknownToolError(name)
        return self._factories[name]

    def names(self) -> list[str]:
        """Return the registered names in sorted order."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


def register_builtin_tools(registry: ToolRegistry) -> ToolRegistry:
    """Register the polyline and triangle tools.

    Args:
        registry: The registry to populate.

    Returns:
        The same registry, for chaining.
    """
    registry.register(PolylineTool.tool_name, PolylineTool)
    registry.register(TriangleTool.tool_name, TriangleTool)
    return registry


def default_registry() -> ToolRegistry:
    """Create a registry holding the built-in tools."""
    return register_builtin_tools(ToolRegistry())
