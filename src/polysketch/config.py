"""Editor configuration for polysketch."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from polysketch.core.style import ToolStyle


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in {"1", "true", "yes", "on"}


@dataclass
class EditorConfig:
    """Configuration for the drawing editor.

    Environment variables:
        POLYSKETCH_POINT_RADIUS: Interaction radius around a vertex, in pixels
        POLYSKETCH_HIT_TOLERANCE: Maximum distance from an edge counted as a hit
        POLYSKETCH_LINE_WIDTH: Edge width in pixels
        POLYSKETCH_CANVAS_WIDTH: Width of the drawing surface
        POLYSKETCH_CANVAS_HEIGHT: Height of the drawing surface
        POLYSKETCH_DEBUG: Enable debug logging
        POLYSKETCH_JSON_LOGS: Emit logs as JSON
    """

    point_radius: float = field(default_factory=lambda: _env_float("POLYSKETCH_POINT_RADIUS", 5.0))
    hit_tolerance: float = field(default_factory=lambda: _env_float("POLYSKETCH_HIT_TOLERANCE", 5.0))
    line_width: float = field(default_factory=lambda: _env_float("POLYSKETCH_LINE_WIDTH", 2.0))
    canvas_width: int = field(default_factory=lambda: int(os.getenv("POLYSKETCH_CANVAS_WIDTH", "800")))
    canvas_height: int = field(default_factory=lambda: int(os.getenv("POLYSKETCH_CANVAS_HEIGHT", "600")))
    debug: bool = field(default_factory=lambda: _env_flag("POLYSKETCH_DEBUG"))
    json_logs: bool = field(default_factory=lambda: _env_flag("POLYSKETCH_JSON_LOGS"))

    def tool_style(self) -> ToolStyle:
        """Build the tool style described by this configuration."""
        return ToolStyle(
            line_width=self.line_width,
            point_radius=self.point_radius,
            hit_tolerance=self.hit_tolerance,
        )
