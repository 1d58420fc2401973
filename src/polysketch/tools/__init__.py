"""Interactive shape tools for polysketch."""

from polysketch.tools.base import ShapeTool
from polysketch.tools.polyline import PolylineTool
from polysketch.tools.registry import ToolRegistry, default_registry, register_builtin_tools
from polysketch.tools.triangle import TriangleTool

__all__ = [
    "PolylineTool",
    "ShapeTool",
    "ToolRegistry",
    "TriangleTool",
    "default_registry",
    "register_builtin_tools",
]
