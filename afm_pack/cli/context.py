"""Shared state for CLI commands."""

from __future__ import annotations

import click
from rich.console import Console

from afm_pack.config import Config
from afm_pack.exceptions import AfmPackError
from afm_pack.fonts.catalog import load_catalog, load_default_catalog
from afm_pack.fonts.registry import FontRegistry

console = Console()


def load_registry(ctx: click.Context) -> FontRegistry:
    """Load the configured catalog once per invocation and keep it on the context."""
    obj = ctx.find_root().obj
    registry = obj.get("registry")
    if registry is None:
        config: Config = obj["config"]
        try:
            if config.catalog:
                registry = load_catalog(config.catalog)
            else:
                registry = load_default_catalog()
        except AfmPackError as e:
            console.print(f"[red]Error:[/red] {e.message}")
            raise SystemExit(1) from e
        obj["registry"] = registry
    return registry
