"""Polysketch: an interactive 2D vector drawing surface.

Shapes are edited by tools that turn pointer events into vertices: click to
place points, click the last point again (or place the third point of a
triangle) to finish, then drag vertices to reshape.

Key Components:
    - Core: LinkedList, Point, ToolMode, ToolStyle, DisplayList
    - Tools: ShapeTool, PolylineTool, TriangleTool, ToolRegistry
    - Services: DrawingWorkspace (hosts many shapes), ExportService (SVG/PNG)
    - Plugin: PolysketchPlugin for Litestar integration

Quick Start:
    >>> from polysketch import DrawingWorkspace, Point
    >>>
    >>> workspace = DrawingWorkspace()
    >>> workspace.set_active_tool("triangle")
    >>> for x, y in [(0, 0), (10, 0), (10, 10)]:
    ...     _ = workspace.pointer_down(Point(x, y))
    >>> workspace.selected_shape.vertex_count
    4
"""

from __future__ import annotations

__version__ = "0.1.0"

from polysketch.config import EditorConfig
from polysketch.core import (
    DisplayList,
    LinkedList,
    Point,
    PointerEventKind,
    RenderTarget,
    ToolMode,
    ToolStyle,
)
from polysketch.exceptions import (
    DuplicateToolError,
    InvalidEventError,
    InvalidScaleError,
    NoSelectionError,
    PolysketchError,
    PositionOutOfRangeError,
    UnknownToolError,
)
from polysketch.plugin import PolysketchConfig, PolysketchPlugin
from polysketch.services import DrawingWorkspace, ExportService
from polysketch.tools import (
    PolylineTool,
    ShapeTool,
    ToolRegistry,
    TriangleTool,
    default_registry,
    register_builtin_tools,
)

__all__ = [
    "DisplayList",
    "DrawingWorkspace",
    "DuplicateToolError",
    "EditorConfig",
    "ExportService",
    "InvalidEventError",
    "InvalidScaleError",
    "LinkedList",
    "NoSelectionError",
    "Point",
    "PointerEventKind",
    "PolylineTool",
    "PolysketchConfig",
    "PolysketchError",
    "PolysketchPlugin",
    "PositionOutOfRangeError",
    "RenderTarget",
    "ShapeTool",
    "ToolMode",
    "ToolRegistry",
    "ToolStyle",
    "TriangleTool",
    "UnknownToolError",
    "default_registry",
    "register_builtin_tools",
]
