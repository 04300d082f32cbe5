"""Fonts command - catalog inspection."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from afm_pack.cli.context import load_registry
from afm_pack.exceptions import FontNotFoundError
from afm_pack.tables.characters import LOW_CHAR_COUNT, WIDTH_MISSING

console = Console()


@click.group()
def fonts() -> None:
    """Catalog inspection commands."""
    pass


@fonts.command("list")
@click.option("--name", help="Filter by substring of the full name")
@click.pass_context
def list_fonts(ctx: click.Context, name: str | None) -> None:
    """List fonts in the catalog."""
    registry = load_registry(ctx)

    table = Table(title="Catalog Fonts")
    table.add_column("Full name", style="cyan")
    table.add_column("PostScript name", style="green")
    table.add_column("Ascender", style="yellow", justify="right")
    table.add_column("Descender", style="yellow", justify="right")

    count = 0
    for font in registry:
        if name and name.lower() not in font.full_name.lower():
            continue
        table.add_row(
            font.full_name,
            font.postscript_name,
            str(font.ascender),
            str(font.descender),
        )
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} fonts")


@fonts.command("show")
@click.argument("name")
@click.pass_context
def show_font(ctx: click.Context, name: str) -> None:
    """Show metadata and table sizes for one font.

    NAME is the full name or the PostScript name.
    """
    registry = load_registry(ctx)
    font = registry.find(name) or registry.find_by_postscript_name(name)
    if font is None:
        console.print(f"[red]Not found:[/red] {FontNotFoundError(name).message}")
        raise SystemExit(1)

    missing = sum(1 for code in font.widths[:LOW_CHAR_COUNT] if code == WIDTH_MISSING)

    table = Table(title=font.full_name, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("PostScript name", font.postscript_name)
    table.add_row("Ascender", str(font.ascender))
    table.add_row("Descender", str(font.descender))
    table.add_row("Missing ASCII widths", str(missing))
    table.add_row("High characters", str(font.highchars_count))
    table.add_row("Kerning pairs", str(font.kerning_pair_count))
    table.add_row("Kerning bytes", str(len(font.kerning_data)))
    table.add_row("Ligatures", str(font.ligatures_count))
    console.print(table)
