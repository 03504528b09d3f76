"""
Logging configuration.

Routes the standard library logging through Rich so log lines share
the CLI console's formatting.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "INFO", console: Console | None = None) -> None:
    """
    Configure the root logger with a Rich handler.

    Args:
        level: Logging level name.
        console: Console to log to. Defaults to stderr.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
