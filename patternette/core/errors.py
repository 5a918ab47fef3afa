from __future__ import annotations

"""Error taxonomy for tree construction and visitor dispatch.

All of these signal caller misuse at construction or dispatch time; none of
them is meant to be caught and retried.
"""

__all__ = [
    "PatternetteError",
    "MissingChildReference",
    "NullNodeReference",
    "UnhandledElementVariant",
]


class PatternetteError(Exception):  # noqa: D101
    pass


class MissingChildReference(PatternetteError, LookupError):
    """Strict ``remove`` was asked to drop a child the composite does not hold."""

    def __init__(self, parent, child):
        self.parent = parent
        self.child = child
        super().__init__(f"{child!r} is not a child of {parent!r}")


class NullNodeReference(PatternetteError, ValueError):
    """An operation was attempted through an absent (``None``) reference."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"'{operation}' received None instead of an object")


class UnhandledElementVariant(PatternetteError, TypeError):
    """A visitor has no handler for the element variant it was given."""

    def __init__(self, element, visitor, handler: str | None = None):
        self.element = element
        self.visitor = visitor
        self.handler = handler
        what = f"handler '{handler}'" if handler else "a handler"
        super().__init__(
            f"{type(visitor).__name__} has no {what} for {type(element).__name__}"
        )
