"""Style definitions for shape tools."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolStyle:
    """Styling and interaction sizes for shape tools.

    Attributes:
        stroke_color: Color of the shape's edges in hex format.
        marker_color: Fill color of the vertex markers.
        selected_color: Fill color of the selected vertex marker.
        line_width: Width of the edges in pixels.
        point_radius: Radius around a vertex that counts as a direct hit,
            also used as the marker radius.
        hit_tolerance: Maximum distance from an edge that counts as a hit.
    """

    stroke_color: str = "#000000"
    marker_color: str = "#000000"
    selected_color: str = "#008000"
    line_width: float = 2.0
    point_radius: float = 5.0
    hit_tolerance: float = 5.0
