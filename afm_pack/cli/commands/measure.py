"""Measure command - string width of a text in a catalog font."""

from __future__ import annotations

import click
from rich.console import Console

from afm_pack.cli.context import load_registry
from afm_pack.exceptions import FontNotFoundError
from afm_pack.metrics import MetricsEngine

console = Console()


@click.command()
@click.argument("font_name")
@click.argument("text")
@click.option(
    "-s", "--size", type=float, default=12.0, show_default=True, help="Font size"
)
@click.option(
    "--tab-width",
    type=click.FloatRange(min=0),
    help="Tab stop spacing (default: from config)",
)
@click.option(
    "--start",
    type=float,
    default=0.0,
    help="Position of the text within its line",
)
@click.pass_context
def measure(
    ctx: click.Context,
    font_name: str,
    text: str,
    size: float,
    tab_width: float | None,
    start: float,
) -> None:
    """Print the width of TEXT set in FONT_NAME."""
    engine = MetricsEngine(load_registry(ctx), ctx.find_root().obj["config"])

    try:
        font = engine.lookup_font(font_name)
    except FontNotFoundError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise SystemExit(1) from e

    width = engine.text_width(font, text, size, tab_width=tab_width, start=start)
    console.print(f"{width:.3f}")
