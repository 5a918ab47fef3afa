from __future__ import annotations

"""Elements – the closed set of variants a Visitor dispatches on.

Each concrete element knows the one visitor entry point that handles it
(``visit_method``) and calls it with itself. This is the first half of the
double dispatch; the visitor's own class supplies the second.
"""

from typing import TYPE_CHECKING, Any, ClassVar, Optional, Tuple, Type

from patternette.utils.events import ElementVisited, publish
from patternette.utils.logging import log
from .errors import NullNodeReference, UnhandledElementVariant

if TYPE_CHECKING:  # pragma: no cover
    from .visitor import Visitor

__all__ = ["Element", "ElementVariant1", "ElementVariant2", "ELEMENT_VARIANTS"]


class Element:  # noqa: D101
    visit_method: ClassVar[Optional[str]] = None

    def __init__(self, name: Optional[str] = None):
        self.name = name

    def accept(self, visitor: "Visitor") -> Any:
        """Call the visitor's handler for this element's variant."""
        if visitor is None:
            raise NullNodeReference("accept")
        raise UnhandledElementVariant(self, visitor)

    def _dispatch(self, visitor: "Visitor", handler_name: str) -> Any:
        if visitor is None:
            raise NullNodeReference("accept")
        handler = getattr(visitor, handler_name, None)
        if handler is None or not callable(handler):
            raise UnhandledElementVariant(self, visitor, handler_name)
        log.debug("dispatch %s -> %s.%s", type(self).__name__, type(visitor).__name__, handler_name)
        publish(
            ElementVisited(
                visitor=type(visitor).__name__,
                element=type(self).__name__,
                handler=handler_name,
            )
        )
        return handler(self)

    def __repr__(self) -> str:
        suffix = f" {self.name}" if self.name else ""
        return f"<{type(self).__name__}{suffix}>"


class ElementVariant1(Element):  # noqa: D101
    visit_method = "visit_element_variant1"

    def accept(self, visitor: "Visitor") -> Any:
        return self._dispatch(visitor, "visit_element_variant1")


class ElementVariant2(Element):  # noqa: D101
    visit_method = "visit_element_variant2"

    def accept(self, visitor: "Visitor") -> Any:
        return self._dispatch(visitor, "visit_element_variant2")


# Closed variant set: adding a variant means adding an abstract handler to
# Visitor, which every concrete visitor must then implement.
ELEMENT_VARIANTS: Tuple[Type[Element], ...] = (ElementVariant1, ElementVariant2)
