"""Tests for core models, geometry helpers and configuration."""

from __future__ import annotations

import math

import pytest

from polysketch.config import EditorConfig
from polysketch.core.geometry import in_circle, line_distance, point_distance
from polysketch.core.models import Point
from polysketch.core.style import ToolStyle
from polysketch.core.types import PointerEventKind, ToolMode


class TestPoint:
    """Tests for the Point model."""

    def test_create_point(self) -> None:
        """Test creating a basic point."""
        point = Point(x=10.0, y=20.0)
        assert point.x == 10.0
        assert point.y == 20.0

    def test_point_with_negative_coords(self) -> None:
        """Test creating a point with negative coordinates."""
        point = Point(x=-10.5, y=-20.3)
        assert point.x == -10.5
        assert point.y == -20.3

    def test_copy_is_a_new_object(self) -> None:
        """Test that copy() returns an equal but distinct point."""
        point = Point(3, 4)
        copied = point.copy()
        assert copied == point
        assert copied is not point

    def test_move_to_mutates_in_place(self) -> None:
        """Test that move_to changes the existing object."""
        point = Point(0, 0)
        alias = point
        point.move_to(Point(5, 6))
        assert alias.x == 5
        assert alias.y == 6

    def test_str(self) -> None:
        """Test the compact text form."""
        assert str(Point(1.5, 2)) == "(1.5, 2)"


class TestGeometry:
    """Tests for the hit-testing helpers."""

    def test_point_distance(self) -> None:
        """Test the Euclidean distance."""
        assert point_distance(Point(0, 0), Point(3, 4)) == 5

    def test_line_distance_above_edge(self) -> None:
        """Test the distance from a point above a horizontal edge."""
        assert line_distance(Point(5, 2), Point(0, 0), Point(10, 0)) == pytest.approx(2)

    def test_line_distance_is_symmetric_in_endpoints(self) -> None:
        """Test that swapping the endpoints gives the same distance."""
        p = Point(3, 7)
        assert line_distance(p, Point(0, 0), Point(10, 10)) == pytest.approx(line_distance(p, Point(10, 10), Point(0, 0)))

    def test_line_distance_diagonal(self) -> None:
        """Test the distance to a diagonal line."""
        assert line_distance(Point(0, 10), Point(0, 0), Point(10, 10)) == pytest.approx(10 / math.sqrt(2))

    def test_line_distance_measures_infinite_line(self) -> None:
        """Test that the distance is not clamped to the segment."""
        assert line_distance(Point(100, 1), Point(0, 0), Point(10, 0)) == pytest.approx(1)

    def test_line_distance_zero_length_edge(self) -> None:
        """Test that a zero-length edge falls back to the point distance."""
        distance = line_distance(Point(8, 9), Point(5, 5), Point(5, 5))
        assert distance == pytest.approx(5)
        assert not math.isnan(distance)

    def test_in_circle(self) -> None:
        """Test the strict point-in-circle check."""
        assert in_circle(Point(3, 0), Point(0, 0), 5)
        assert not in_circle(Point(5, 0), Point(0, 0), 5)
        assert not in_circle(Point(4, 4), Point(0, 0), 5)


class TestTypes:
    """Tests for the enumerations."""

    def test_tool_mode_values(self) -> None:
        """Test the mode values."""
        assert ToolMode.DRAW == "draw"
        assert ToolMode.MODIFY == "modify"

    def test_pointer_event_kind_from_string(self) -> None:
        """Test building an event kind from its string."""
        assert PointerEventKind("drag") is PointerEventKind.DRAG


class TestToolStyle:
    """Tests for the ToolStyle model."""

    def test_default_style(self) -> None:
        """Test default style values."""
        style = ToolStyle()
        assert style.stroke_color == "#000000"
        assert style.selected_color == "#008000"
        assert style.line_width == 2.0
        assert style.point_radius == 5.0
        assert style.hit_tolerance == 5.0


class TestEditorConfig:
    """Tests for environment-backed configuration."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the defaults when no variables are set."""
        for name in ("POLYSKETCH_POINT_RADIUS", "POLYSKETCH_HIT_TOLERANCE", "POLYSKETCH_DEBUG"):
            monkeypatch.delenv(name, raising=False)
        config = EditorConfig()
        assert config.point_radius == 5.0
        assert config.hit_tolerance == 5.0
        assert config.debug is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings come from the environment."""
        monkeypatch.setenv("POLYSKETCH_POINT_RADIUS", "8")
        monkeypatch.setenv("POLYSKETCH_HIT_TOLERANCE", "3.5")
        monkeypatch.setenv("POLYSKETCH_CANVAS_WIDTH", "1024")
        monkeypatch.setenv("POLYSKETCH_DEBUG", "true")
        config = EditorConfig()
        assert config.point_radius == 8.0
        assert config.hit_tolerance == 3.5
        assert config.canvas_width == 1024
        assert config.debug is True

    def test_tool_style(self) -> None:
        """Test building a tool style from the configuration."""
        style = EditorConfig(point_radius=7, hit_tolerance=2, line_width=4).tool_style()
        assert style.point_radius == 7
        assert style.hit_tolerance == 2
        assert style.line_width == 4
