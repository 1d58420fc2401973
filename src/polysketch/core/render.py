"""Render target protocol and the recording display list."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class RenderTarget(Protocol):
    """Protocol defining the drawing surface shape tools render onto.

    Targets are write-only from the editor's point of view: tools never read
    anything back from them.
    """

    def set_stroke_color(self, color: str) -> None:
        """Set the color used by subsequent ``stroke_line`` calls.

        Args:
            color: Color in hex format.
        """
        ...

    def set_fill_color(self, color: str) -> None:
        """Set the color used by subsequent ``fill_oval`` calls.

        Args:
            color: Color in hex format.
        """
        ...

    def set_line_width(self, width: float) -> None:
        """Set the width used by subsequent ``stroke_line`` calls.

        Args:
            width: Line width in pixels.
        """
        ...

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Stroke a straight segment between two points."""
        ...

    def fill_oval(self, x: float, y: float, width: float, height: float) -> None:
        """Fill the oval inscribed in the given bounding box.

        Args:
            x: Left edge of the bounding box.
            y: Top edge of the bounding box.
            width: Width of the bounding box.
            height: Height of the bounding box.
        """
        ...


class DrawOpKind(StrEnum):
    """Kinds of operations recorded in a display list."""

    STROKE_COLOR = "stroke_color"
    FILL_COLOR = "fill_color"
    LINE_WIDTH = "line_width"
    LINE = "line"
    OVAL = "oval"


@dataclass(frozen=True)
class DrawOp:
    """A single recorded draw call.

    Attributes:
        kind: What the call does.
        args: Positional arguments of the call, in protocol order.
    """

    kind: DrawOpKind
    args: tuple[Any, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"op": self.kind.value, "args": list(self.args)}


class DisplayList:
    """A render target that records every call for later replay.

    The workspace binds all of its tools to one display list; exporters then
    replay it onto SVG or raster targets.
    """

    def __init__(self) -> None:
        """Initialize an empty display list."""
        self._ops: list[DrawOp] = []

    def set_stroke_color(self, color: str) -> None:
        """Record a stroke color change."""
        self._ops.append(DrawOp(DrawOpKind.STROKE_COLOR, (color,)))

    def set_fill_color(self, color: str) -> None:
        """Record a fill color change."""
        self._ops.append(DrawOp(DrawOpKind.FILL_COLOR, (color,)))

    def set_line_width(self, width: float) -> None:
        """Record a line width change."""
        self._ops.append(DrawOp(DrawOpKind.LINE_WIDTH, (width,)))

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Record a stroked segment."""
        self._ops.append(DrawOp(DrawOpKind.LINE, (x1, y1, x2, y2)))

    def fill_oval(self, x: float, y: float, width: float, height: float) -> None:
        """Record a filled oval."""
        self._ops.append(DrawOp(DrawOpKind.OVAL, (x, y, width, height)))

    def clear(self) -> None:
        """Drop every recorded operation."""
        self._ops.clear()

    def ops_of(self, kind: DrawOpKind) -> list[DrawOp]:
        """Return the recorded operations of one kind, in order."""
        return [op for op in self._ops if op.kind == kind]

    def replay(self, target: RenderTarget) -> None:
        """Re-issue every recorded call, in order, onto another target.

        Args:
            target: The target to draw onto.
        """
        for op in self._ops:
            if op.kind == DrawOpKind.STROKE_COLOR:
                target.set_stroke_color(*op.args)
            elif op.kind == DrawOpKind.FILL_COLOR:
                target.set_fill_color(*op.args)
            elif op.kind == DrawOpKind.LINE_WIDTH:
                target.set_line_width(*op.args)
            elif op.kind == DrawOpKind.LINE:
                target.stroke_line(*op.args)
            elif op.kind == DrawOpKind.OVAL:
                target.fill_oval(*op.args)

    def to_list(self) -> list[dict[str, Any]]:
        """Convert all operations to dictionaries for serialization."""
        return [op.to_dict() for op in self._ops]

    def __len__(self) -> int:
        return len(self._ops)

    def __iter__(self) -> Iterator[DrawOp]:
        return iter(self._ops)
