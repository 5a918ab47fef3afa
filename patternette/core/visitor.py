from __future__ import annotations

"""Visitors – one handler per element variant, selected by double dispatch.

`Visitor` declares every handler abstract, so a visitor that forgets a
variant fails at instantiation (``TypeError``) rather than mid-traversal.
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Any, Iterable, List

from patternette.io.sink import Sink, resolve_sink
from .element import Element, ElementVariant1, ElementVariant2

__all__ = ["Visitor", "Visitor1", "Visitor2", "CountingVisitor"]


class Visitor(ABC):  # noqa: D101
    @abstractmethod
    def visit_element_variant1(self, element: ElementVariant1) -> Any:
        ...

    @abstractmethod
    def visit_element_variant2(self, element: ElementVariant2) -> Any:
        ...

    # -------------------------------------------------- #

    def visit(self, element: Element) -> Any:
        """Shorthand for ``element.accept(self)``."""
        return element.accept(self)

    def visit_all(self, elements: Iterable[Element]) -> List[Any]:
        """Visit *elements* in order and return the handler results."""
        return [element.accept(self) for element in elements]


class _PrintingVisitor(Visitor):
    """Writes ``ConcreteVisitor<k> visit concrete element<j>`` for each visit."""

    number: int = 0

    def __init__(self, sink: Sink | None = None):
        self.sink = resolve_sink(sink)

    def _say(self, element_no: int) -> None:
        self.sink.write_line(f"ConcreteVisitor{self.number} visit concrete element{element_no}")

    def visit_element_variant1(self, element: ElementVariant1) -> None:
        self._say(1)

    def visit_element_variant2(self, element: ElementVariant2) -> None:
        self._say(2)


class Visitor1(_PrintingVisitor):  # noqa: D101
    number = 1


class Visitor2(_PrintingVisitor):  # noqa: D101
    number = 2


class CountingVisitor(Visitor):
    """Accumulating visitor: tallies visits per variant.

    Each handler returns the running count for its variant, so
    ``visit_all`` yields the tally progression.
    """

    def __init__(self):
        self.counts: Counter[str] = Counter()

    def visit_element_variant1(self, element: ElementVariant1) -> int:
        self.counts[type(element).__name__] += 1
        return self.counts[type(element).__name__]

    def visit_element_variant2(self, element: ElementVariant2) -> int:
        self.counts[type(element).__name__] += 1
        return self.counts[type(element).__name__]

    @property
    def total(self) -> int:
        return sum(self.counts.values())
