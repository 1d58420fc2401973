"""Tool for closed 3-point triangles."""

from __future__ import annotations

import structlog

from polysketch.tools.base import ShapeTool

logger = structlog.get_logger(__name__)


class TriangleTool(ShapeTool):
    """Closed triangle drawn with three clicks.

    The third click finishes the shape. Finishing appends the first vertex
    again, as the very same object, so the outline is a closed loop that stays
    closed while vertex 0 is dragged.
    """

    tool_name = "triangle"
    label = "Triangle"
    target_vertex_count = 3

    def _close(self) -> None:
        if self.vertex_count == 0:
            return
        self.vertices.append(self.vertices.get(0))
        logger.debug("Triangle closed", vertices=self.vertex_count)
