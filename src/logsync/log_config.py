"""Console logging setup for logsync."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route logsync log records to a Rich console handler.

    Calling it again only adjusts the level; no duplicate handlers are added.

    Args:
        verbose: Log at DEBUG instead of INFO.
        console: Console to render to. Defaults to stderr.
    """
    logger = logging.getLogger("logsync")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
