"""Compile command - build a packed catalog from AFM files."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from afm_pack.exceptions import AfmPackError
from afm_pack.fonts.afm import read_afm
from afm_pack.fonts.catalog import dump_catalog
from afm_pack.fonts.registry import FontRegistry

console = Console()


@click.command("compile")
@click.argument(
    "afm_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Catalog file to write",
)
@click.option(
    "--continue-on-error", is_flag=True, help="Skip AFM files that fail to parse"
)
def compile_catalog(
    afm_files: tuple[Path, ...], output: Path, continue_on_error: bool
) -> None:
    """Compile AFM_FILES into a packed catalog."""
    records = []
    error_count = 0
    for afm_path in afm_files:
        try:
            records.append(read_afm(afm_path))
        except AfmPackError as e:
            error_count += 1
            console.print(f"[red]Error in {afm_path}:[/red] {e.message}")
            if not continue_on_error:
                raise SystemExit(1) from e

    try:
        registry = FontRegistry.from_records(records)
    except AfmPackError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise SystemExit(1) from e

    dump_catalog(registry, output)
    console.print(f"[green]Compiled:[/green] {len(registry)} fonts -> {output}")
    if error_count:
        console.print(f"[yellow]Skipped:[/yellow] {error_count} files")
