from __future__ import annotations

"""Demo registry for Patternette.

Each demo builds a small object structure and exercises it against an
injected sink, so the same demo serves the CLI and the tests.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from patternette.config import RenderOptions
from patternette.core.composite import Composite
from patternette.core.decorator import SuffixDecorator
from patternette.core.element import ElementVariant1, ElementVariant2
from patternette.core.leaf import Leaf, LeafVariant2
from patternette.core.visitor import Visitor1, Visitor2
from patternette.io.sink import Sink, resolve_sink

__all__ = [
    "Demo",
    "DEMOS",
    "register_demo",
    "get_demo",
    "build_demo_tree",
]

DemoFn = Callable[[Sink, Optional[RenderOptions]], None]

# Global in-memory store of demos, in registration order.
DEMOS: Dict[str, "Demo"] = {}


@dataclass
class Demo:  # noqa: D101
    name: str
    summary: str
    fn: DemoFn

    def run(self, sink: Sink | None = None, opts: RenderOptions | None = None) -> None:
        self.fn(resolve_sink(sink), opts)


def register_demo(name: str, summary: str = ""):  # noqa: D401 – decorator factory
    """Register the decorated function as demo *name*."""

    def _decorator(fn: DemoFn) -> DemoFn:
        if name in DEMOS:
            raise ValueError(f"Demo '{name}' is already registered.")
        DEMOS[name] = Demo(name=name, summary=summary or (fn.__doc__ or "").strip(), fn=fn)
        return fn

    return _decorator


def get_demo(name: str) -> Demo:
    if name not in DEMOS:
        raise KeyError(f"Demo '{name}' is not registered.")
    return DEMOS[name]


# --------------------------------------------------------------------------- #
# Built-in demos
# --------------------------------------------------------------------------- #

def build_demo_tree() -> Composite:
    """Root with Leaf, Leaf, Leaf2 and a nested composite holding Leaf, Leaf2."""
    tree = Composite(name="root")
    tree.add(Leaf()).add(Leaf()).add(LeafVariant2())
    tree2 = Composite(name="branch")
    tree.add(tree2)
    tree2.add(Leaf()).add(LeafVariant2())
    return tree


@register_demo("composite", "Render a two-level part-whole tree, pre-order.")
def composite_demo(sink: Sink, opts: RenderOptions | None = None) -> None:
    build_demo_tree().render(sink, opts=opts)


@register_demo("visitor", "Dispatch every (element, visitor) pair once.")
def visitor_demo(sink: Sink, opts: RenderOptions | None = None) -> None:
    v1, v2 = Visitor1(sink), Visitor2(sink)
    e1, e2 = ElementVariant1(), ElementVariant2()
    e1.accept(v1)
    e1.accept(v2)
    e2.accept(v1)
    e2.accept(v2)


@register_demo("decorator", "Wrap a leaf in two stacked suffix decorators.")
def decorator_demo(sink: Sink, opts: RenderOptions | None = None) -> None:
    node = Leaf("coffee")
    node.render(sink, opts=opts)
    node = SuffixDecorator(node, "+ honey")
    node.render(sink, opts=opts)
    node = SuffixDecorator(node, "+ milk")
    node.render(sink, opts=opts)
