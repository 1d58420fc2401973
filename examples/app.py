"""Minimal example showing polysketch usage with Litestar.

This example demonstrates how to create a basic Litestar application with
polysketch integration using the plugin system.

The application will:
    - Create one DrawingWorkspace with the built-in line and triangle tools
    - Mount REST API endpoints at /api
    - Enable dependency injection for DrawingWorkspace in route handlers

Running the Application:
    python examples/app.py

Then visit:
    - http://127.0.0.1:8000/schema - OpenAPI documentation
    - http://127.0.0.1:8000/api/workspace - Workspace state

Example API Usage:
    # Pick the triangle tool
    curl -X PUT http://127.0.0.1:8000/api/workspace/tool \\
        -H "Content-Type: application/json" \\
        -d '{"name": "triangle"}'

    # Place the three vertices
    for xy in '10 10' '200 10' '200 150'; do
        set -- $xy
        curl -X POST http://127.0.0.1:8000/api/workspace/events \\
            -H "Content-Type: application/json" \\
            -d "{\\"kind\\": \\"down\\", \\"x\\": $1, \\"y\\": $2}"
    done

    # Download the drawing
    curl -o triangle.svg http://127.0.0.1:8000/api/workspace/export/svg
"""

from __future__ import annotations

from litestar import Litestar

from polysketch import EditorConfig, PolysketchConfig, PolysketchPlugin

# Create the Litestar app with the polysketch plugin
app = Litestar(
    plugins=[
        PolysketchPlugin(
            PolysketchConfig(
                # Larger markers and a more forgiving edge hit test
                editor=EditorConfig(point_radius=8, hit_tolerance=8),
                # Enable REST API endpoints
                enable_api=True,
                # Mount API routes at /api
                api_path="/api",
            )
        )
    ],
    debug=True,
)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="127.0.0.1",
        port=8000,
        log_level="info",
    )
