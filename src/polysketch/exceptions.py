"""Custom exceptions for polysketch."""

from __future__ import annotations


class PolysketchError(Exception):
    """Base exception class for all polysketch errors."""


class PositionOutOfRangeError(PolysketchError, IndexError):
    """Raised when a list position is outside the live elements.

    Attributes:
        position: The position that was requested.
        size: The number of elements in the list at the time of the request.
    """

    def __init__(self, position: int, size: int) -> None:
        """Initialize the exception with the offending position.

        Args:
            position: The position that was requested.
            size: The size of the list.
        """
        self.position = position
        self.size = size
        super().__init__(f"Position {position} out of range for list of size {size}")


class UnknownToolError(PolysketchError):
    """Raised when a tool name has not been registered.

    Attributes:
        name: The tool name that was requested.
    """

    def __init__(self, name: str) -> None:
        """Initialize the exception with the tool name.

        Args:
            name: The tool name that was requested.
        """
        self.name = name
        super().__init__(f"No tool registered under the name {name!r}")


class DuplicateToolError(PolysketchError):
    """Raised when a tool name is registered twice."""

    def __init__(self, name: str) -> None:
        """Initialize the exception with the tool name.

        Args:
            name: The tool name that is already taken.
        """
        self.name = name
        super().__init__(f"A tool is already registered under the name {name!r}")


class InvalidEventError(PolysketchError):
    """Raised when a pointer event kind is not recognised."""

    def __init__(self, kind: str) -> None:
        """Initialize the exception with the event kind.

        Args:
            kind: The event kind that was sent.
        """
        self.kind = kind
        super().__init__(f"Unknown pointer event kind: {kind}")


class NoSelectionError(PolysketchError):
    """Raised when an operation needs a selected shape and there is none."""

    def __init__(self) -> None:
        """Initialize the exception."""
        super().__init__("No shape is currently selected")


class InvalidScaleError(PolysketchError):
    """Raised when a raster export scale is not a positive, bounded factor.

    Attributes:
        scale: The scale that was requested.
    """

    def __init__(self, scale: float, maximum: float) -> None:
        """Initialize the exception with the offending scale.

        Args:
            scale: The scale that was requested.
            maximum: The largest accepted scale.
        """
        self.scale = scale
        super().__init__(f"Export scale must be greater than 0 and at most {maximum:g}, got {scale:g}")
