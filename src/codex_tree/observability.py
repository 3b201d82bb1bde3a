"""Logging setup for the command line."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(debug: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Route the ``codex_tree`` loggers through a rich handler on stderr.

    Args:
        debug: Log at DEBUG instead of WARNING.
        console: Console to log to; a stderr console by default.

    Returns:
        The package logger. Calling this again replaces the handler
        instead of stacking another one.
    """
    logger = logging.getLogger("codex_tree")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=debug,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger
