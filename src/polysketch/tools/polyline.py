"""Tool for open polylines."""

from __future__ import annotations

from polysketch.tools.base import ShapeTool


class PolylineTool(ShapeTool):
    """Open polyline with any number of vertices.

    Drawing ends when the user clicks the last placed vertex again.
    """

    tool_name = "line"
    label = "Line"
