from __future__ import annotations

"""Tree helpers (no side-effects).

iter_nodes(root) yields (depth, node) depth-first, pre-order.
build_rich_tree(root) returns a Rich *Tree* ready for printing.
"""
from collections import Counter
from typing import Iterator, Tuple

from patternette.config import DEFAULT_OPTIONS, RenderOptions
from patternette.core.composite import Composite
from patternette.core.decorator import NodeDecorator, PrefixDecorator, SuffixDecorator
from patternette.core.leaf import Leaf, LeafVariant2
from patternette.core.node import Node
from patternette.utils.constants import STYLE, SYMBOLS

__all__ = [
    "iter_nodes",
    "count_nodes",
    "build_rich_tree",
]

# --------------------------------------------------------------------------- #
# Core traverser
# --------------------------------------------------------------------------- #

def iter_nodes(root: Node) -> Iterator[Tuple[int, Node]]:  # noqa: D401
    """Yield *(depth, node)* for *root* and every node below it (pre-order).

    A decorator is yielded at the depth of the node it wraps, followed by
    the wrapped node itself.
    """

    def _walk(node: Node, depth: int):
        yield depth, node
        if isinstance(node, NodeDecorator):
            yield from _walk(node.wrappee, depth)
        elif isinstance(node, Composite):
            for child in node.get_children():
                yield from _walk(child, depth + 1)

    yield from _walk(root, 0)


def count_nodes(root: Node) -> Counter:
    """Return a Counter of node type names found under *root* (inclusive)."""
    return Counter(type(node).__name__ for _, node in iter_nodes(root))


# --------------------------------------------------------------------------- #
# Rich-aware tree builder (import lazily to avoid hard dep at import time)
# --------------------------------------------------------------------------- #

def _kind(node: Node) -> str:
    if isinstance(node, Composite):
        return "composite"
    if isinstance(node, LeafVariant2):
        return "leaf2"
    if isinstance(node, Leaf):
        return "leaf"
    return "decorator"


def _node_label(node: Node, opts: RenderOptions) -> str:
    from rich.markup import escape

    kind = _kind(node)
    if isinstance(node, Composite):
        text = f"{node.label()} ({opts.count_line(len(node))})"
    elif isinstance(node, PrefixDecorator):
        text = f"{type(node).__name__} '{node.prefix}'"
    elif isinstance(node, SuffixDecorator):
        text = f"{type(node).__name__} '{node.suffix}'"
    else:
        text = node.label()
    icon = SYMBOLS[kind] if opts.icons_on else ""
    return f"{icon}[{STYLE[kind]}]{escape(text)}[/]"


def build_rich_tree(root: Node, opts: RenderOptions | None = None):  # noqa: D401 – return type is Tree but avoid import
    """Return a *rich.tree.Tree* visualisation of *root* (side-effect-free).

    With ``opts.max_children`` set, children past the limit collapse into a
    single ``+N more…`` entry.
    """
    from rich.tree import Tree  # local import keeps this module lightweight

    opts = opts or DEFAULT_OPTIONS
    tree = Tree(_node_label(root, opts))

    def _add(parent: "Tree", node: Node):
        if isinstance(node, NodeDecorator):
            inner = node.wrappee
            _add(parent.add(_node_label(inner, opts)), inner)
            return
        if not isinstance(node, Composite):
            return
        children = node.get_children()
        shown = children if opts.max_children is None else children[: opts.max_children]
        for child in shown:
            _add(parent.add(_node_label(child, opts)), child)
        hidden = len(children) - len(shown)
        if hidden:
            parent.add(f"[{STYLE['more']}]+{hidden} more…[/]")

    _add(tree, root)
    return tree
