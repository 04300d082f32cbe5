"""afm-pack command line entry point."""

from __future__ import annotations

from pathlib import Path

import click

from afm_pack import __version__
from afm_pack.cli.commands import compile_catalog, fonts, measure
from afm_pack.cli.context import console
from afm_pack.config import LOG_LEVELS, Config
from afm_pack.exceptions import AfmPackError
from afm_pack.log import setup_logging


@click.group()
@click.version_option(__version__, prog_name="afm-pack")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "--catalog",
    type=click.Path(path_type=Path),
    help="Packed catalog file (overrides config)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    catalog: Path | None,
    log_level: str | None,
) -> None:
    """Packed font metrics: inspect catalogs and measure text."""
    ctx.ensure_object(dict)
    try:
        config = Config.load(config_path)
        if catalog is not None:
            config = Config.from_dict(
                {
                    "catalog": catalog,
                    "default_width": config.default_width,
                    "tab_width": config.tab_width,
                    "log_level": config.log_level,
                },
                source=config.source,
            )
    except AfmPackError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise SystemExit(1) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(fonts)
cli.add_command(measure)
cli.add_command(compile_catalog)


if __name__ == "__main__":
    cli()
