from __future__ import annotations
"""Rich-backed logging and tree display helpers.

The root logger is configured once with a Rich handler; library code logs
through ``log`` (the ``patternette`` logger) and rarely above DEBUG.
"""
from typing import Any
from logging import Logger, getLogger, INFO, DEBUG, WARNING, ERROR, basicConfig

from rich.console import Console
from rich.logging import RichHandler

console = Console()

__all__ = [
    "console",
    "get",
    "log",
    "show_tree",
]

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

# Configure root once with Rich handler for plain log messages
basicConfig(
    level=WARNING,
    format="%(message)s",
    datefmt="%H:%M:%S",
    handlers=[RichHandler(console=console, rich_tracebacks=True, markup=True)],
)

log: Logger = getLogger("patternette")


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the package logger set to *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("patternette")
    lg.setLevel(lvl)
    return lg


def show_tree(root: Any, **kw) -> None:
    """Print the Rich tree view of *root* on the shared console."""
    from patternette.utils.tree import build_rich_tree  # local import avoids a cycle with core

    console.print(build_rich_tree(root, **kw))
