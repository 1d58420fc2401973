"""Core type definitions for polysketch."""

from __future__ import annotations

from enum import StrEnum


class ToolMode(StrEnum):
    """Editing phase of a shape tool.

    A tool starts in DRAW and moves to MODIFY once; there is no way back.
    """

    DRAW = "draw"
    MODIFY = "modify"


class PointerEventKind(StrEnum):
    """Pointer events a host can dispatch to the editor."""

    DOWN = "down"
    MOVE = "move"
    DRAG = "drag"
    UP = "up"
