from __future__ import annotations

"""Decorator nodes: a Node that holds another Node and delegates to it.

A prefix decorator writes before delegating, a suffix decorator after.
Decorators stack by wrapping one another; there is no inheritance chain
between decorator kinds.
"""

from patternette.config import DEFAULT_OPTIONS, RenderOptions
from patternette.io.sink import Sink, resolve_sink
from .errors import NullNodeReference
from .node import Node

__all__ = ["NodeDecorator", "PrefixDecorator", "SuffixDecorator"]


class NodeDecorator(Node):
    """Transparent wrapper: renders exactly what the wrappee renders."""

    def __init__(self, wrappee: Node):
        if wrappee is None:
            raise NullNodeReference("decorate")
        self.wrappee = wrappee
        self.name = wrappee.name

    def render(
        self,
        sink: Sink | None = None,
        *,
        opts: RenderOptions | None = None,
        depth: int = 0,
    ) -> None:
        self.wrappee.render(resolve_sink(sink), opts=opts, depth=depth)

    def unwrap(self) -> Node:
        """Return the innermost non-decorator node."""
        node: Node = self
        while isinstance(node, NodeDecorator):
            node = node.wrappee
        return node


class PrefixDecorator(NodeDecorator):  # noqa: D101
    def __init__(self, wrappee: Node, prefix: str):
        super().__init__(wrappee)
        self.prefix = prefix

    def render(
        self,
        sink: Sink | None = None,
        *,
        opts: RenderOptions | None = None,
        depth: int = 0,
    ) -> None:
        sink = resolve_sink(sink)
        opts = opts or DEFAULT_OPTIONS
        self._emit(sink, opts, depth, self.prefix)
        super().render(sink, opts=opts, depth=depth)


class SuffixDecorator(NodeDecorator):
    """Delegates first, then writes its own line ("extra work after")."""

    def __init__(self, wrappee: Node, suffix: str):
        super().__init__(wrappee)
        self.suffix = suffix

    def render(
        self,
        sink: Sink | None = None,
        *,
        opts: RenderOptions | None = None,
        depth: int = 0,
    ) -> None:
        sink = resolve_sink(sink)
        opts = opts or DEFAULT_OPTIONS
        super().render(sink, opts=opts, depth=depth)
        self._emit(sink, opts, depth, self.suffix)
