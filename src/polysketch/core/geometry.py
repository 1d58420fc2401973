"""Hit-testing helpers."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polysketch.core.models import Point


def point_distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def line_distance(p: Point, first: Point, last: Point) -> float:
    """Distance from ``p`` to the line through ``first`` and ``last``.

    The distance is measured to the infinite line, not clamped to the
    segment. When both endpoints coincide the line is undefined and the
    distance to the endpoint is returned instead.

    Args:
        p: The point to measure.
        first: First endpoint of the edge.
        last: Second endpoint of the edge.

    Returns:
        The perpendicular distance.
    """
    dx = last.x - first.x
    dy = last.y - first.y
    denominator = math.sqrt(dy * dy + dx * dx)
    if denominator == 0:
        return point_distance(p, first)
    numerator = abs(dy * p.x - dx * p.y + last.x * first.y - last.y * first.x)
    return numerator / denominator


def in_circle(p: Point, center: Point, radius: float) -> bool:
    """Check whether ``p`` lies strictly inside the circle around ``center``."""
    dx = center.x - p.x
    dy = center.y - p.y
    return dx * dx + dy * dy < radius * radius
