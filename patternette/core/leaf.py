from __future__ import annotations

"""Terminal nodes of the composite tree."""

from typing import Optional

from patternette.config import DEFAULT_OPTIONS, RenderOptions
from patternette.io.sink import Sink, resolve_sink
from .node import Node

__all__ = ["Leaf", "LeafVariant2"]


class Leaf(Node):
    """A childless node that writes a single line: its label and optional name."""

    def __init__(self, name: Optional[str] = None):
        self.name = name

    def _text(self, opts: RenderOptions) -> str:
        return f"{opts.leaf_label} {self.name}" if self.name else opts.leaf_label

    def render(
        self,
        sink: Sink | None = None,
        *,
        opts: RenderOptions | None = None,
        depth: int = 0,
    ) -> None:
        opts = opts or DEFAULT_OPTIONS
        self._emit(resolve_sink(sink), opts, depth, self._text(opts))


class LeafVariant2(Leaf):  # noqa: D101 – differs only by its label
    def _text(self, opts: RenderOptions) -> str:
        return f"{opts.leaf2_label} {self.name}" if self.name else opts.leaf2_label
