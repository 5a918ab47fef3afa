from __future__ import annotations
"""Static validators for composite trees and visitor classes.

Nothing here mutates or repairs a tree; callers decide what to do with the
reported issues.
"""
from typing import List, Set, Tuple, Type

from patternette.core.composite import Composite
from patternette.core.decorator import NodeDecorator
from patternette.core.element import ELEMENT_VARIANTS
from patternette.core.node import Node

__all__ = ["find_tree_issues", "missing_handlers", "TreeIssue"]

TreeIssue = Tuple[str, str]  # (kind, node label) – kind is "cycle" or "shared"


def find_tree_issues(root: Node) -> List[TreeIssue]:  # noqa: D401
    """Return cycles and shared nodes reachable from *root*.

    * ``cycle``: a node reachable from itself.
    * ``shared``: a node reached more than once without a cycle (two parents,
      or listed twice in one composite).
    """
    issues: List[TreeIssue] = []
    reported: Set[Tuple[str, int]] = set()
    visited: Set[int] = set()
    path: Set[int] = set()

    def _report(kind: str, node: Node):
        key = (kind, id(node))
        if key not in reported:
            reported.add(key)
            issues.append((kind, node.label()))

    def _visit(node: Node):
        if id(node) in path:
            _report("cycle", node)
            return
        if id(node) in visited:
            _report("shared", node)
            return
        visited.add(id(node))
        path.add(id(node))
        if isinstance(node, NodeDecorator):
            _visit(node.wrappee)
        elif isinstance(node, Composite):
            for child in node.get_children():
                _visit(child)
        path.remove(id(node))

    _visit(root)
    return issues


def missing_handlers(visitor_cls: Type) -> List[str]:
    """Names of variant handlers *visitor_cls* lacks or leaves abstract."""
    missing: List[str] = []
    for variant in ELEMENT_VARIANTS:
        handler = getattr(visitor_cls, variant.visit_method, None)
        if handler is None or getattr(handler, "__isabstractmethod__", False):
            missing.append(variant.visit_method)
    return missing
