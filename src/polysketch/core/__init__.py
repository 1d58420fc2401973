"""Core building blocks for polysketch."""

from polysketch.core.geometry import in_circle, line_distance, point_distance
from polysketch.core.llist import LinkedList
from polysketch.core.models import Point
from polysketch.core.render import DisplayList, DrawOp, DrawOpKind, RenderTarget
from polysketch.core.style import ToolStyle
from polysketch.core.types import PointerEventKind, ToolMode

__all__ = [
    "DisplayList",
    "DrawOp",
    "DrawOpKind",
    "LinkedList",
    "Point",
    "PointerEventKind",
    "RenderTarget",
    "ToolMode",
    "ToolStyle",
    "in_circle",
    "line_distance",
    "point_distance",
]
