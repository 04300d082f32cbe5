"""Logging setup for afm-pack.

Library modules only create loggers; handlers are installed by the CLI or
by the embedding application.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "afm_pack"


def setup_logging(
    level: str = "WARNING", console: Console | None = None
) -> logging.Logger:
    """Route afm_pack log records to a rich handler on stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
