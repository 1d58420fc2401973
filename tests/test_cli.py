"""Tests for the polysketch command line interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import pytest
from click.testing import CliRunner
from PIL import Image

from polysketch.cli import parse_point, sketch_group
from polysketch.core.models import Point

if TYPE_CHECKING:
    from pathlib import Path

TRIANGLE_CLICKS = ["-c", "0,0", "-c", "100,0", "-c", "100,100"]


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


class TestParsePoint:
    """Tests for coordinate parsing."""

    def test_parse(self) -> None:
        """Test parsing two numbers."""
        assert parse_point("1.5,-2") == Point(1.5, -2.0)

    @pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b"])
    def test_parse_invalid(self, text: str) -> None:
        """Test that malformed coordinates are rejected."""
        with pytest.raises(click.BadParameter):
            parse_point(text)


class TestToolsCommand:
    """Tests for the tools command."""

    def test_lists_builtin_tools(self, runner: CliRunner) -> None:
        """Test that the built-in tools are listed."""
        result = runner.invoke(sketch_group, ["tools"])
        assert result.exit_code == 0, result.output
        assert "line" in result.output
        assert "Triangle" in result.output
        assert "any" in result.output


class TestRenderCommand:
    """Tests for the render command."""

    def test_render_svg(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test replaying clicks into an SVG file."""
        output = tmp_path / "triangle.svg"
        result = runner.invoke(sketch_group, ["render", "-t", "triangle", *TRIANGLE_CLICKS, "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Wrote" in result.output
        svg = output.read_text()
        assert svg.count("<line") == 3
        assert svg.count("<ellipse") == 4

    def test_render_without_markers(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that --no-select leaves out the vertex markers."""
        output = tmp_path / "triangle.svg"
        result = runner.invoke(
            sketch_group,
            ["render", "-t", "triangle", *TRIANGLE_CLICKS, "--no-select", "-o", str(output)],
        )

        assert result.exit_code == 0, result.output
        assert "<ellipse" not in output.read_text()

    def test_render_png(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test replaying clicks into a PNG file."""
        output = tmp_path / "triangle.png"
        result = runner.invoke(sketch_group, ["render", "-t", "triangle", *TRIANGLE_CLICKS, "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_bytes().startswith(b"\x89PNG\r\n\x1a\n")

    def test_render_drag(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test dragging a vertex after the shape is finished."""
        output = tmp_path / "triangle.svg"
        result = runner.invoke(
            sketch_group,
            ["render", "-t", "triangle", *TRIANGLE_CLICKS, "-d", "100,100:150,150", "-o", str(output)],
        )

        assert result.exit_code == 0, result.output
        svg = output.read_text()
        assert 'x2="150.0" y2="150.0"' in svg
        # the dragged vertex is drawn again in the selected color
        assert svg.count("<ellipse") == 5
        assert 'fill="#008000"' in svg

    def test_bad_suffix(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that only SVG and PNG outputs are accepted."""
        result = runner.invoke(sketch_group, ["render", "-t", "line", "-c", "0,0", "-o", str(tmp_path / "a.gif")])
        assert result.exit_code == 2

    def test_unknown_tool(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that unknown tools are rejected."""
        result = runner.invoke(sketch_group, ["render", "-t", "hexagon", "-o", str(tmp_path / "a.svg")])
        assert result.exit_code == 2
        assert not (tmp_path / "a.svg").exists()

    def test_bad_coordinate(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that malformed clicks are rejected."""
        result = runner.invoke(sketch_group, ["render", "-t", "line", "-c", "zero", "-o", str(tmp_path / "a.svg")])
        assert result.exit_code == 2

    def test_bad_drag(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that drags need both endpoints."""
        result = runner.invoke(sketch_group, ["render", "-t", "line", "-d", "1,1", "-o", str(tmp_path / "a.svg")])
        assert result.exit_code == 2

    @pytest.mark.parametrize("scale", ["0", "-2", "100"])
    def test_bad_scale(self, runner: CliRunner, tmp_path: Path, scale: str) -> None:
        """Test that the PNG scale must be positive and bounded."""
        output = tmp_path / "a.png"
        result = runner.invoke(
            sketch_group,
            ["render", "-t", "triangle", *TRIANGLE_CLICKS, "--scale", scale, "-o", str(output)],
        )
        assert result.exit_code == 2
        assert not output.exists()

    def test_scale(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that a valid scale enlarges the PNG."""
        output = tmp_path / "a.png"
        result = runner.invoke(
            sketch_group,
            ["render", "-t", "triangle", *TRIANGLE_CLICKS, "--scale", "0.5", "-o", str(output)],
        )
        assert result.exit_code == 0, result.output
        with Image.open(output) as image:
            assert image.size == (400, 300)
