"""loguru -> Rich bridge.

Services log through loguru; this module decides where those records end up
for the CLI: a Rich console, styled by level.
"""

from __future__ import annotations

from typing import Callable

from loguru import logger
from rich.console import Console
from rich.text import Text

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "SUCCESS": "green",
    "WARNING": "yellow",
    "ERROR": "bold red",
    "CRITICAL": "bold red",
}


def _rich_sink(console: Console) -> Callable[[object], None]:
    def sink(message: object) -> None:
        record = message.record  # type: ignore[attr-defined]
        level = record["level"].name
        console.print(Text(record["message"], style=_LEVEL_STYLES.get(level, "")))

    return sink


def configure_logging(console: Console, *, verbose: bool = False) -> int:
    """Replace loguru's default stderr sink with one writing to `console`.

    Returns the sink id so callers (tests) can remove it again.
    """

    logger.remove()
    return logger.add(
        _rich_sink(console),
        level="DEBUG" if verbose else "INFO",
        format="{message}",
        colorize=False,
    )
