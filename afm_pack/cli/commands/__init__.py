"""CLI commands for afm-pack."""

from afm_pack.cli.commands.compile import compile_catalog
from afm_pack.cli.commands.fonts import fonts
from afm_pack.cli.commands.measure import measure

__all__ = ["compile_catalog", "fonts", "measure"]
