"""Tests for export functionality."""

from __future__ import annotations

import io

import pytest
from litestar import Litestar
from litestar.testing import TestClient
from PIL import Image

from polysketch.core.models import Point
from polysketch.core.render import DisplayList
from polysketch.exceptions import InvalidScaleError
from polysketch.services.export import MAX_EXPORT_SCALE, ExportService, SvgRenderTarget, _parse_color
from polysketch.services.workspace import DrawingWorkspace

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def export_service() -> ExportService:
    """Create an ExportService instance."""
    return ExportService()


@pytest.fixture
def horizontal_line() -> DisplayList:
    """Create a display list holding one thick black line at y=50."""
    display_list = DisplayList()
    display_list.set_stroke_color("#000000")
    display_list.set_line_width(5)
    display_list.stroke_line(10, 50, 90, 50)
    return display_list


class TestParseColor:
    """Tests for hex color parsing."""

    def test_rgb(self) -> None:
        """Test six-digit colors."""
        assert _parse_color("#008000") == (0, 128, 0, 255)

    def test_rgba(self) -> None:
        """Test eight-digit colors."""
        assert _parse_color("#ff000080") == (255, 0, 0, 128)

    def test_fallback(self) -> None:
        """Test that empty or malformed colors fall back to black."""
        assert _parse_color(None) == (0, 0, 0, 255)
        assert _parse_color("#abc") == (0, 0, 0, 255)


class TestSvgExport:
    """Tests for SVG export."""

    def test_empty_display_list(self, export_service: ExportService) -> None:
        """Test exporting nothing but the background."""
        svg = export_service.to_svg(DisplayList(), 200, 100)

        assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert 'width="200"' in svg
        assert 'viewBox="0 0 200 100"' in svg
        assert 'fill="#ffffff"' in svg
        assert "<line" not in svg
        assert svg.endswith("</svg>")

    def test_custom_background(self, export_service: ExportService) -> None:
        """Test the background color option."""
        svg = export_service.to_svg(DisplayList(), 10, 10, background="#f0f0f0")
        assert '<rect width="100%" height="100%" fill="#f0f0f0"/>' in svg

    def test_line_attributes(self, export_service: ExportService) -> None:
        """Test that stroke state is carried onto each line."""
        display_list = DisplayList()
        display_list.set_stroke_color("#ff0000")
        display_list.set_line_width(3)
        display_list.stroke_line(0, 0, 10, 0)

        svg = export_service.to_svg(display_list, 100, 100)
        assert 'x1="0" y1="0" x2="10" y2="0"' in svg
        assert 'stroke="#ff0000"' in svg
        assert 'stroke-width="3"' in svg

    def test_oval_is_centered_in_box(self) -> None:
        """Test that ovals become ellipses centred in their bounding box."""
        target = SvgRenderTarget()
        target.set_fill_color("#008000")
        target.fill_oval(95, -5, 10, 10)

        assert target.elements == ['  <ellipse cx="100.0" cy="0.0" rx="5.0" ry="5.0" fill="#008000"/>']

    def test_selected_triangle(self, export_service: ExportService, triangle_workspace: DrawingWorkspace) -> None:
        """Test exporting a selected triangle with its markers."""
        svg = export_service.to_svg(triangle_workspace.render(), 800, 600)

        assert svg.count("<line") == 3
        assert svg.count("<ellipse") == 4

    def test_unselected_triangle_has_no_markers(
        self,
        export_service: ExportService,
        triangle_workspace: DrawingWorkspace,
    ) -> None:
        """Test that deselected shapes export only their edges."""
        triangle_workspace.deselect()
        svg = export_service.to_svg(triangle_workspace.render(), 800, 600)

        assert svg.count("<line") == 3
        assert "<ellipse" not in svg


class TestPngExport:
    """Tests for PNG export."""

    def test_png_signature_and_size(self, export_service: ExportService, horizontal_line: DisplayList) -> None:
        """Test that the output is a PNG of the surface size."""
        png = export_service.to_png(horizontal_line, 100, 80)

        assert png.startswith(PNG_SIGNATURE)
        with Image.open(io.BytesIO(png)) as image:
            assert image.size == (100, 80)

    def test_png_scale(self, export_service: ExportService, horizontal_line: DisplayList) -> None:
        """Test that scaling enlarges the image."""
        png = export_service.to_png(horizontal_line, 100, 80, scale=2.0)

        with Image.open(io.BytesIO(png)) as image:
            assert image.size == (200, 160)

    def test_png_pixels(self, export_service: ExportService, horizontal_line: DisplayList) -> None:
        """Test that lines are drawn over the background."""
        png = export_service.to_png(horizontal_line, 100, 80)

        with Image.open(io.BytesIO(png)) as image:
            rgba = image.convert("RGBA")
            assert rgba.getpixel((50, 50)) == (0, 0, 0, 255)
            assert rgba.getpixel((50, 5)) == (255, 255, 255, 255)

    def test_png_markers(self, export_service: ExportService, triangle_workspace: DrawingWorkspace) -> None:
        """Test that vertex markers are filled on the raster image."""
        png = export_service.to_png(triangle_workspace.render(), 200, 200, background="#ffffff")

        with Image.open(io.BytesIO(png)) as image:
            rgba = image.convert("RGBA")
            assert rgba.getpixel((100, 100)) == (0, 0, 0, 255)
            assert rgba.getpixel((50, 90)) == (255, 255, 255, 255)

    @pytest.mark.parametrize("scale", [0.0, -1.0, MAX_EXPORT_SCALE + 1, float("nan")])
    def test_png_rejects_bad_scale(
        self,
        export_service: ExportService,
        horizontal_line: DisplayList,
        scale: float,
    ) -> None:
        """Test that non-positive, oversized or NaN scales are refused before allocating."""
        with pytest.raises(InvalidScaleError) as exc_info:
            export_service.to_png(horizontal_line, 100, 80, scale=scale)
        assert "scale" in str(exc_info.value)

    def test_png_max_scale(self, export_service: ExportService, horizontal_line: DisplayList) -> None:
        """Test that the largest scale is accepted."""
        png = export_service.to_png(horizontal_line, 10, 10, scale=MAX_EXPORT_SCALE)
        with Image.open(io.BytesIO(png)) as image:
            assert image.size == (80, 80)


class TestExportAPI:
    """Tests for the export endpoints."""

    def _draw_triangle(self, client: TestClient[Litestar]) -> None:
        client.put("/api/workspace/tool", json={"name": "triangle"})
        for x, y in [(0, 0), (100, 0), (100, 100)]:
            client.post("/api/workspace/events", json={"kind": "down", "x": x, "y": y})

    def test_export_svg(self, client: TestClient[Litestar]) -> None:
        """Test exporting the workspace as SVG."""
        self._draw_triangle(client)
        response = client.get("/api/workspace/export/svg")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert "workspace.svg" in response.headers["content-disposition"]
        assert response.text.count("<line") == 3

    def test_export_png(self, client: TestClient[Litestar]) -> None:
        """Test exporting the workspace as PNG."""
        self._draw_triangle(client)
        response = client.get("/api/workspace/export/png")

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.content.startswith(PNG_SIGNATURE)

    def test_export_png_with_scale(self, client: TestClient[Litestar]) -> None:
        """Test the scale query parameter."""
        response = client.get("/api/workspace/export/png", params={"scale": 0.5})

        assert response.status_code == 200
        with Image.open(io.BytesIO(response.content)) as image:
            assert image.size == (400, 300)

    def test_points_render_at_event_locations(self, client: TestClient[Litestar]) -> None:
        """Test that the SVG carries the clicked coordinates."""
        client.put("/api/workspace/tool", json={"name": "line"})
        for point in (Point(10, 20), Point(30, 40), Point(30, 40)):
            client.post("/api/workspace/events", json={"kind": "down", "x": point.x, "y": point.y})

        svg = client.get("/api/workspace/export/svg").text
        assert 'x1="10.0" y1="20.0" x2="30.0" y2="40.0"' in svg

    @pytest.mark.parametrize("scale", ["0", "-1", "100"])
    def test_export_png_rejects_bad_scale(self, client: TestClient[Litestar], scale: str) -> None:
        """Test that out-of-range scales are a client error."""
        response = client.get("/api/workspace/export/png", params={"scale": scale})
        assert response.status_code == 400

    def test_export_png_rejects_non_numeric_scale(self, client: TestClient[Litestar]) -> None:
        """Test that a scale that is not a number is a client error."""
        response = client.get("/api/workspace/export/png", params={"scale": "big"})
        assert response.status_code == 400
