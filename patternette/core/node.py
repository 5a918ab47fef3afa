from __future__ import annotations

"""Base Node class for the Patternette composite tree."""

from typing import TYPE_CHECKING, Optional

from patternette.config import DEFAULT_OPTIONS, RenderOptions
from patternette.utils.events import NodeRendered, publish

if TYPE_CHECKING:  # pragma: no cover
    from patternette.io.sink import Sink

__all__ = ["Node"]


class Node:  # noqa: D101 – minimalist base class
    name: Optional[str] = None

    def render(
        self,
        sink: "Sink | None" = None,
        *,
        opts: RenderOptions | None = None,
        depth: int = 0,
    ) -> None:
        """Write this node's lines to *sink*, children included."""
        raise NotImplementedError

    # -------------------------------------------------- #

    def label(self) -> str:
        """Short display label (used by logs, events and the tree view)."""
        return f"{type(self).__name__} {self.name}" if self.name else type(self).__name__

    def _emit(self, sink: "Sink", opts: RenderOptions | None, depth: int, text: str) -> None:
        opts = opts or DEFAULT_OPTIONS
        sink.write_line(opts.prefix(depth) + text)
        publish(NodeRendered(node_type=type(self).__name__, name=self.name, depth=depth))

    def __repr__(self) -> str:
        return f"<{self.label()}>"
