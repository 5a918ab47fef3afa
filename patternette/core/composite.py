from __future__ import annotations
"""Composite – interior node that owns an ordered list of child nodes.

Rendering is depth-first and pre-order: the composite writes the number of
its immediate children, then renders each child in insertion order.

A composite must never end up below itself. ``add`` does not check this; use
:func:`patternette.utils.validate.find_tree_issues` to look for cycles.
"""
from typing import Iterator, List, Optional, Tuple

from patternette.config import DEFAULT_OPTIONS, RenderOptions
from patternette.io.sink import Sink, resolve_sink
from patternette.utils.events import ChildAdded, ChildRemoved, publish
from patternette.utils.logging import log
from .errors import MissingChildReference, NullNodeReference
from .node import Node

__all__ = ["Composite"]


class Composite(Node):  # noqa: D101
    def __init__(self, children: Optional[List[Node]] = None, *, name: Optional[str] = None):
        self.name = name
        self._children: List[Node] = []
        for child in children or []:
            self.add(child)

    # Mutation ----------------------------------------------------------- #
    def add(self, child: Node) -> "Composite":
        """Append *child*; duplicates are kept. Returns *self* for chaining."""
        if child is None:
            raise NullNodeReference("add")
        if not isinstance(child, Node):
            raise TypeError(f"Composite.add expects a Node, got {type(child).__name__}")
        self._children.append(child)
        log.debug("added %s to %s", child.label(), self.label())
        publish(ChildAdded(parent=self.label(), child=child.label()))
        return self

    def remove(self, child: Node, *, strict: bool = False) -> None:
        """Remove the first child that *is* *child*.

        An absent child is ignored unless *strict* is set, in which case
        :class:`MissingChildReference` is raised.
        """
        for idx, current in enumerate(self._children):
            if current is child:
                del self._children[idx]
                log.debug("removed %s from %s", child.label(), self.label())
                publish(ChildRemoved(parent=self.label(), child=child.label()))
                return
        if strict:
            raise MissingChildReference(self, child)

    # Access -------------------------------------------------------------- #
    def get_children(self) -> Tuple[Node, ...]:
        """Snapshot of the current children (not updated by later changes)."""
        return tuple(self._children)

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._children))

    def __len__(self) -> int:
        return len(self._children)

    # Rendering ----------------------------------------------------------- #
    def render(
        self,
        sink: Sink | None = None,
        *,
        opts: RenderOptions | None = None,
        depth: int = 0,
    ) -> None:
        sink = resolve_sink(sink)
        opts = opts or DEFAULT_OPTIONS
        self._emit(sink, opts, depth, opts.count_line(len(self._children)))
        for child in self._children:
            child.render(sink, opts=opts, depth=depth + 1)
