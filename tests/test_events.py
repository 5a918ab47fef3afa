import logging

from patternette import Composite, ElementVariant2, Leaf, ListSink, Visitor1, render_lines
from patternette.utils import events
from patternette.utils.events import (
    ChildAdded,
    ChildRemoved,
    ElementVisited,
    NodeRendered,
    publish,
    subscribe,
    unsubscribe,
)


def test_render_publishes_one_event_per_line():
    seen = []

    def _on_render(evt: NodeRendered):
        seen.append((evt.node_type, evt.depth))

    subscribe(NodeRendered)(_on_render)
    try:
        render_lines(Composite([Leaf(), Composite()]))
    finally:
        unsubscribe(NodeRendered, _on_render)

    assert seen == [("Composite", 0), ("Leaf", 1), ("Composite", 1)]


def test_add_and_remove_publish_events():
    seen = []
    handler = seen.append
    subscribe(ChildAdded)(handler)
    subscribe(ChildRemoved)(handler)
    try:
        leaf = Leaf("a")
        root = Composite(name="r")
        root.add(leaf)
        root.remove(leaf)
        root.remove(leaf)  # absent: no event
    finally:
        unsubscribe(ChildAdded, handler)
        unsubscribe(ChildRemoved, handler)

    assert [type(e).__name__ for e in seen] == ["ChildAdded", "ChildRemoved"]
    assert seen[0].parent == "Composite r" and seen[0].child == "Leaf a"


def test_dispatch_publishes_handler_name():
    seen = []
    subscribe(ElementVisited)(seen.append)
    try:
        ElementVariant2().accept(Visitor1(ListSink()))
    finally:
        unsubscribe(ElementVisited, seen.append)

    assert len(seen) == 1
    assert seen[0].visitor == "Visitor1"
    assert seen[0].element == "ElementVariant2"
    assert seen[0].handler == "visit_element_variant2"


def test_failing_subscriber_is_logged_not_raised(caplog):
    def _boom(evt):
        raise RuntimeError("boom")

    subscribe(NodeRendered)(_boom)
    try:
        with caplog.at_level(logging.WARNING, logger="patternette"):
            assert render_lines(Leaf()) == ["Leaf"]
    finally:
        unsubscribe(NodeRendered, _boom)

    assert "boom" in caplog.text


def test_clear_drops_subscribers():
    seen = []
    subscribe(NodeRendered)(seen.append)
    events.clear()
    publish(NodeRendered(node_type="Leaf", name=None, depth=0))
    assert seen == []
