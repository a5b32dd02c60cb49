"""Logging configuration.

Everything logs through stdlib ``logging`` under the ``netpulse`` logger
namespace; the CLI renders records with Rich so they interleave cleanly with
tables and the external tools' own output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "netpulse"


def configure_logging(level: str | int = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Install a single RichHandler on the project logger.

    Calling it again only updates the level, so the CLI callback and
    subcommands can both call it.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the project logger for module ``name``."""

    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
