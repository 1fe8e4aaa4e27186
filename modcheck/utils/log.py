"""Logging setup.  Diagnostics go through ``logging``, rendered by rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "modcheck"


def setup_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
    """Configure the ``modcheck`` logger and return it.

    Unknown level names fall back to WARNING.  Existing handlers are
    replaced so repeated calls do not duplicate output.
    """
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
