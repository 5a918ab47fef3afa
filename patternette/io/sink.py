"""
Output sinks – where rendered lines and visitor messages go.

Nodes and visitors never print directly; they write lines to a sink so
callers (and tests) decide whether output lands on the console, a stream or
an in-memory list.
"""

from __future__ import annotations

from typing import IO, List, Optional

from rich.console import Console

__all__ = ["Sink", "ConsoleSink", "StreamSink", "ListSink", "resolve_sink"]


class Sink:  # noqa: D101 – minimalist base class
    def write_line(self, text: str) -> None:
        raise NotImplementedError


class ConsoleSink(Sink):
    """Write lines through a Rich console, verbatim (no markup, no highlighting)."""

    def __init__(self, console: Optional[Console] = None):
        if console is None:
            from patternette.utils.logging import console as shared_console

            console = shared_console
        self.console = console

    def write_line(self, text: str) -> None:
        # one write_line is one physical line, whatever the console width
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


class StreamSink(Sink):  # noqa: D101
    def __init__(self, stream: IO[str]):
        self.stream = stream

    def write_line(self, text: str) -> None:
        self.stream.write(text + "\n")


class ListSink(Sink):
    """Collect lines in memory; ``lines`` keeps them in write order."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def clear(self) -> None:
        self.lines.clear()

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def resolve_sink(sink: Sink | None) -> Sink:
    """Return *sink*, or a console sink when none was injected."""
    return sink if sink is not None else ConsoleSink()
