"""Core domain models for polysketch."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Point:
    """Represents a point in 2D space.

    Points compare by value, but a shape vertex is identified by the object
    itself: dragging a vertex moves the stored instance in place.

    Attributes:
        x: X-coordinate position.
        y: Y-coordinate position.
    """

    x: float
    y: float

    def copy(self) -> Point:
        """Return a new point with the same coordinates."""
        return replace(self)

    def move_to(self, other: Point) -> None:
        """Move this point onto the coordinates of ``other``."""
        self.x = other.x
        self.y = other.y

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"
