from __future__ import annotations
"""Construction helpers and render entry points.

Example::

    root = new_composite(new_leaf(), new_leaf(), new_composite(new_leaf_variant2()))
    render_tree(root)

    # same tree, described as nested lists
    root = from_nested(["leaf", "leaf", ["leaf2"]])
"""
from typing import Any, List, Optional

from patternette.config import RenderOptions
from patternette.core.composite import Composite
from patternette.core.errors import NullNodeReference
from patternette.core.leaf import Leaf, LeafVariant2
from patternette.core.node import Node
from patternette.io.sink import ListSink, Sink, resolve_sink

__all__ = [
    "new_leaf",
    "new_leaf_variant2",
    "new_composite",
    "from_nested",
    "render_tree",
    "render_lines",
]

_LEAF_TOKENS = {"leaf": Leaf, "leaf2": LeafVariant2}


def new_leaf(name: Optional[str] = None) -> Leaf:
    return Leaf(name)


def new_leaf_variant2(name: Optional[str] = None) -> LeafVariant2:
    return LeafVariant2(name)


def new_composite(*children: Node, name: Optional[str] = None) -> Composite:
    """Return a composite holding *children* in the given order."""
    return Composite(list(children), name=name)


def from_nested(shape: List[Any]) -> Composite:  # noqa: D401
    """Build a tree from nested lists of ``"leaf"`` / ``"leaf2"`` tokens.

    Lists become composites; ``"leaf:<name>"`` names the leaf.
    """
    if not isinstance(shape, list):
        raise ValueError("from_nested expects a list at the top level")
    root = Composite()
    for item in shape:
        if isinstance(item, list):
            root.add(from_nested(item))
            continue
        if not isinstance(item, str):
            raise ValueError(f"Unknown tree token {item!r}")
        token, _, name = item.partition(":")
        if token not in _LEAF_TOKENS:
            raise ValueError(f"Unknown tree token {item!r}")
        root.add(_LEAF_TOKENS[token](name or None))
    return root


def render_tree(root: Node, sink: Sink | None = None, opts: RenderOptions | None = None) -> None:
    """Render *root* to *sink* (console when omitted)."""
    if root is None:
        raise NullNodeReference("render")
    root.render(resolve_sink(sink), opts=opts)


def render_lines(root: Node, opts: RenderOptions | None = None) -> List[str]:
    """Render *root* and return the produced lines."""
    sink = ListSink()
    render_tree(root, sink, opts)
    return sink.lines
