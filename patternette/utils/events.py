from __future__ import annotations
"""Ultra-lightweight pub/sub **EventBus** for tree and dispatch activity.

Core classes publish events; the CLI (``--json-logs``) and tests subscribe.

Example
-------
```python
from patternette.utils.events import subscribe, publish, NodeRendered

@subscribe(NodeRendered)
def _on_render(evt: NodeRendered):
    print(f"{evt.node_type} rendered at depth {evt.depth}")
```
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

__all__ = [
    "Event",
    "NodeRendered",
    "ChildAdded",
    "ChildRemoved",
    "ElementVisited",
    "subscribe",
    "unsubscribe",
    "publish",
    "clear",
]

T = TypeVar("T", bound="Event")
_Handler = Callable[[Any], None]
_REGISTRY: Dict[Type["Event"], List[_Handler]] = {}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, kw_only=True)
class Event:  # noqa: D101 – base event
    ts: datetime = field(default_factory=_now)


# --------------------------------------------------------------------------- #
# Concrete events
# --------------------------------------------------------------------------- #
@dataclass(slots=True)
class NodeRendered(Event):
    node_type: str
    name: Optional[str]
    depth: int


@dataclass(slots=True)
class ChildAdded(Event):
    parent: str
    child: str


@dataclass(slots=True)
class ChildRemoved(Event):
    parent: str
    child: str


@dataclass(slots=True)
class ElementVisited(Event):
    visitor: str
    element: str
    handler: str


# --------------------------------------------------------------------------- #
# API helpers
# --------------------------------------------------------------------------- #

def subscribe(event_type: Type[T]):  # noqa: D401
    """Decorator: register *func* to receive *event_type* events."""

    def _decorator(func: _Handler) -> _Handler:
        _REGISTRY.setdefault(event_type, []).append(func)
        return func

    return _decorator


def unsubscribe(event_type: Type[T], func: _Handler) -> None:
    """Remove *func* from *event_type* subscribers (no-op if absent)."""
    handlers = _REGISTRY.get(event_type, [])
    if func in handlers:
        handlers.remove(func)


def publish(evt: Event) -> None:  # noqa: D401
    """Publish an event to all registered subscribers."""
    for func in _REGISTRY.get(type(evt), []):
        try:
            func(evt)
        except Exception as e:  # noqa: BLE001
            # A failing subscriber must never break rendering or dispatch.
            from patternette.utils.logging import log

            log.warning("event handler %s failed: %s", getattr(func, "__name__", func), e)


def clear() -> None:
    """Drop every subscription."""
    _REGISTRY.clear()
