"""Command line interface for polysketch.

Available both as the standalone ``polysketch`` command and, through
``PolysketchCLIPlugin``, as ``litestar sketch``.
"""

from __future__ import annotations

from pathlib import Path

import rich_click as click
from litestar.plugins import CLIPluginProtocol
from rich.console import Console
from rich.table import Table

from polysketch.config import EditorConfig
from polysketch.core.logging import configure_logging
from polysketch.core.models import Point
from polysketch.exceptions import UnknownToolError
from polysketch.services.export import MAX_EXPORT_SCALE, ExportService
from polysketch.services.workspace import DrawingWorkspace
from polysketch.tools.registry import default_registry

console = Console()

EXPORT_SUFFIXES = (".svg", ".png")


def parse_point(text: str) -> Point:
    """Parse ``"X,Y"`` into a point.

    Raises:
        click.BadParameter: If the text is not two comma-separated numbers.
    """
    try:
        x, y = (float(part) for part in text.split(","))
    except ValueError:
        msg = f"expected X,Y but got {text!r}"
        raise click.BadParameter(msg) from None
    return Point(x, y)


def _points_callback(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[Point]:  # noqa: ARG001
    return [parse_point(item) for item in value]


def _drags_callback(
    ctx: click.Context,  # noqa: ARG001
    param: click.Parameter,  # noqa: ARG001
    value: tuple[str, ...],
) -> list[tuple[Point, Point]]:
    drags = []
    for item in value:
        start, sep, end = item.partition(":")
        if not sep:
            msg = f"expected FROM_X,FROM_Y:TO_X,TO_Y but got {item!r}"
            raise click.BadParameter(msg)
        drags.append((parse_point(start), parse_point(end)))
    return drags


@click.group(name="sketch", help="Drive the polysketch editor from the command line.")
@click.option("--debug/--no-debug", default=False, help="Enable debug logging")
def sketch_group(debug: bool) -> None:
    """Drive the polysketch editor from the command line."""
    configure_logging(debug=debug, cache_loggers=False)


@sketch_group.command(name="tools", help="List the registered drawing tools.")
def list_tools() -> None:
    """List the registered drawing tools."""
    registry = default_registry()

    table = Table(title="Drawing Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Label", style="green")
    table.add_column("Vertices", style="yellow", justify="right")

    for name in registry.names():
        factory = registry.factory(name)
        target_count = getattr(factory, "target_vertex_count", None)
        table.add_row(
            name,
            getattr(factory, "label", name.title()),
            str(target_count) if target_count is not None else "any",
        )

    console.print(table)


@sketch_group.command(name="render", help="Replay pointer clicks with one tool and export the result.")
@click.option("--tool", "-t", "tool_name", required=True, help="Tool used for the shape")
@click.option(
    "--click",
    "-c",
    "clicks",
    multiple=True,
    callback=_points_callback,
    help="Pointer press at X,Y (repeatable)",
)
@click.option(
    "--drag",
    "-d",
    "drags",
    multiple=True,
    callback=_drags_callback,
    help="Press at FROM_X,FROM_Y then drag to TO_X,TO_Y (repeatable)",
)
@click.option("--select/--no-select", default=True, help="Draw vertex markers for the last shape")
@click.option(
    "--scale",
    default=1.0,
    type=click.FloatRange(min=0, min_open=True, max=MAX_EXPORT_SCALE),
    help="Scale factor for PNG output",
)
@click.option("--output", "-o", required=True, type=click.Path(dir_okay=False, path_type=Path), help="SVG or PNG file")
def render(
    tool_name: str,
    clicks: list[Point],
    drags: list[tuple[Point, Point]],
    select: bool,
    scale: float,
    output: Path,
) -> None:
    """Replay pointer clicks with one tool and export the result."""
    suffix = output.suffix.lower()
    if suffix not in EXPORT_SUFFIXES:
        msg = f"output must end in one of {', '.join(EXPORT_SUFFIXES)}"
        raise click.BadParameter(msg, param_hint="--output")

    editor = EditorConfig()
    workspace = DrawingWorkspace(style=editor.tool_style(), width=editor.canvas_width, height=editor.canvas_height)
    try:
        workspace.set_active_tool(tool_name)
    except UnknownToolError as e:
        raise click.BadParameter(str(e), param_hint="--tool") from e

    for point in clicks:
        workspace.pointer_down(point)
        workspace.pointer_up(point)
    for start, end in drags:
        workspace.pointer_down(start)
        workspace.pointer_drag(end)
        workspace.pointer_up(end)
    if not select:
        workspace.deselect()

    export_service = ExportService()
    display_list = workspace.render()
    if suffix == ".svg":
        output.write_text(export_service.to_svg(display_list, workspace.width, workspace.height))
    else:
        output.write_bytes(
            export_service.to_png(display_list, workspace.width, workspace.height, scale=scale)
        )

    console.print(
        f"[green]Wrote[/green] {output} "
        f"([cyan]{len(workspace.shapes)}[/cyan] shapes, [cyan]{len(display_list)}[/cyan] draw operations)"
    )


class PolysketchCLIPlugin(CLIPluginProtocol):
    """CLI plugin that adds the ``sketch`` command group to ``litestar``."""

    def on_cli_init(self, cli: click.Group) -> None:
        """Register the sketch command group."""
        cli.add_command(sketch_group)


def main() -> None:
    """Entry point for the ``polysketch`` console script."""
    sketch_group()
