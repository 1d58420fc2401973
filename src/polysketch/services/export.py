"""Export service for rendering display lists to image formats."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from polysketch.exceptions import InvalidScaleError

if TYPE_CHECKING:
    from polysketch.core.render import DisplayList

MAX_EXPORT_SCALE = 8.0


def _parse_color(color: str | None) -> tuple[int, int, int, int]:
    """Parse hex color string to RGBA tuple."""
    if not color:
        return (0, 0, 0, 255)
    color = color.lstrip("#")
    if len(color) == 6:
        r, g, b = int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)
        return (r, g, b, 255)
    if len(color) == 8:
        r, g, b, a = int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16), int(color[6:8], 16)
        return (r, g, b, a)
    return (0, 0, 0, 255)


class SvgRenderTarget:
    """Render target that collects SVG markup."""

    def __init__(self) -> None:
        """Initialize with black strokes and fills."""
        self.elements: list[str] = []
        self._stroke = "#000000"
        self._fill = "#000000"
        self._line_width = 1.0

    def set_stroke_color(self, color: str) -> None:
        """Set the stroke color for following lines."""
        self._stroke = color

    def set_fill_color(self, color: str) -> None:
        """Set the fill color for following ovals."""
        self._fill = color

    def set_line_width(self, width: float) -> None:
        """Set the stroke width for following lines."""
        self._line_width = width

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Add a ``<line>`` element."""
        self.elements.append(
            f'  <line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
            f'stroke="{self._stroke}" '
            f'stroke-width="{self._line_width}" '
            f'stroke-linecap="round"/>'
        )

    def fill_oval(self, x: float, y: float, width: float, height: float) -> None:
        """Add an ``<ellipse>`` element inscribed in the bounding box."""
        cx = x + width / 2
        cy = y + height / 2
        self.elements.append(f'  <ellipse cx="{cx}" cy="{cy}" rx="{width / 2}" ry="{height / 2}" fill="{self._fill}"/>')


class PillowRenderTarget:
    """Render target drawing onto a Pillow image."""

    def __init__(self, image: Image.Image, *, scale: float = 1.0) -> None:
        """Initialize the target.

        Args:
            image: Image to draw onto.
            scale: Factor applied to every coordinate and width.
        """
        self.image = image
        self.scale = scale
        self._draw = ImageDraw.Draw(image)
        self._stroke = _parse_color("#000000")
        self._fill = _parse_color("#000000")
        self._line_width = 1.0

    def set_stroke_color(self, color: str) -> None:
        """Set the stroke color for following lines."""
        self._stroke = _parse_color(color)

    def set_fill_color(self, color: str) -> None:
        """Set the fill color for following ovals."""
        self._fill = _parse_color(color)

    def set_line_width(self, width: float) -> None:
        """Set the stroke width for following lines."""
        self._line_width = width

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a line segment."""
        s = self.scale
        self._draw.line(
            [(x1 * s, y1 * s), (x2 * s, y2 * s)],
            fill=self._stroke,
            width=max(1, int(self._line_width * s)),
        )

    def fill_oval(self, x: float, y: float, width: float, height: float) -> None:
        """Draw a filled ellipse inside the bounding box."""
        s = self.scale
        self._draw.ellipse([x * s, y * s, (x + width) * s, (y + height) * s], fill=self._fill)


class ExportService:
    """Service for exporting rendered shapes.

    Supports exporting to:
    - SVG: Vector graphics representation
    - PNG: Raster image
    """

    def to_svg(self, display_list: DisplayList, width: int, height: int, *, background: str = "#ffffff") -> str:
        """Export a display list to SVG format.

        Args:
            display_list: Recorded draw operations.
            width: Surface width in pixels.
            height: Surface height in pixels.
            background: Background color in hex format.

        Returns:
            SVG string representation of the drawing.
        """
        target = SvgRenderTarget()
        display_list.replay(target)

        return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg"
     width="{width}"
     height="{height}"
     viewBox="0 0 {width} {height}">
  <rect width="100%" height="100%" fill="{background}"/>
{chr(10).join(target.elements)}
</svg>"""

    def to_png(
        self,
        display_list: DisplayList,
        width: int,
        height: int,
        *,
        scale: float = 1.0,
        background: str = "#ffffff",
    ) -> bytes:
        """Export a display list to PNG format using Pillow.

        Args:
            display_list: Recorded draw operations.
            width: Surface width in pixels.
            height: Surface height in pixels.
            scale: Scale factor for the output image.
            background: Background color in hex format.

        Returns:
            PNG image as bytes.

        Raises:
            InvalidScaleError: If ``scale`` is not in ``(0, MAX_EXPORT_SCALE]``.
        """
        if not 0 < scale <= MAX_EXPORT_SCALE:
            raise InvalidScaleError(scale, MAX_EXPORT_SCALE)
        image = Image.new("RGBA", (int(width * scale), int(height * scale)), _parse_color(background))
        display_list.replay(PillowRenderTarget(image, scale=scale))

        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
