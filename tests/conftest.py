"""Pytest configuration and fixtures for polysketch tests."""

from __future__ import annotations

import pytest
from litestar import Litestar
from litestar.testing import TestClient

from polysketch.core.models import Point
from polysketch.core.render import DisplayList
from polysketch.core.style import ToolStyle
from polysketch.plugin import PolysketchConfig, PolysketchPlugin
from polysketch.services.workspace import DrawingWorkspace
from polysketch.tools.polyline import PolylineTool
from polysketch.tools.triangle import TriangleTool


@pytest.fixture
def display_list() -> DisplayList:
    """Create an empty display list to render onto."""
    return DisplayList()


@pytest.fixture
def style() -> ToolStyle:
    """Create the default tool style (radius 5, tolerance 5)."""
    return ToolStyle()


# Tool fixtures


@pytest.fixture
def polyline(display_list: DisplayList) -> PolylineTool:
    """Create a fresh, selected polyline tool."""
    tool = PolylineTool(display_list)
    tool.select(True)
    return tool


@pytest.fixture
def triangle(display_list: DisplayList) -> TriangleTool:
    """Create a fresh, selected triangle tool."""
    tool = TriangleTool(display_list)
    tool.select(True)
    return tool


@pytest.fixture
def finished_polyline(polyline: PolylineTool) -> PolylineTool:
    """Create a polyline (0,0)-(10,0) finished by re-clicking its last vertex."""
    polyline.on_pointer_down(Point(0, 0))
    polyline.on_pointer_down(Point(10, 0))
    polyline.on_pointer_down(Point(10, 0))
    return polyline


# Workspace fixtures


@pytest.fixture
def workspace() -> DrawingWorkspace:
    """Create an empty workspace with the built-in tools."""
    return DrawingWorkspace()


@pytest.fixture
def triangle_workspace(workspace: DrawingWorkspace) -> DrawingWorkspace:
    """Create a workspace holding one finished triangle (0,0), (100,0), (100,100)."""
    workspace.set_active_tool("triangle")
    for x, y in [(0, 0), (100, 0), (100, 100)]:
        workspace.pointer_down(Point(x, y))
        workspace.pointer_up(Point(x, y))
    return workspace


# App and client fixtures


@pytest.fixture
def app() -> Litestar:
    """Create a Litestar app with PolysketchPlugin for testing."""
    return Litestar(plugins=[PolysketchPlugin(PolysketchConfig())])


@pytest.fixture
def client(app: Litestar) -> TestClient[Litestar]:
    """Create a test client for the app."""
    return TestClient(app=app)
