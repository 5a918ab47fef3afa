"""Patternette: composite trees and visitor double dispatch, small and typed.

Main components:
* `Leaf` / `LeafVariant2` / `Composite`: part-whole tree rendered pre-order
* `PrefixDecorator` / `SuffixDecorator`: nodes that wrap and delegate to another node
* `ElementVariant1` / `ElementVariant2`: closed element set for visitors
* `Visitor1` / `Visitor2` / `CountingVisitor`: one handler per element variant
"""

# Version info
__version__ = "0.1.0"

# Core components
from patternette.core.node import Node
from patternette.core.leaf import Leaf, LeafVariant2
from patternette.core.composite import Composite
from patternette.core.decorator import NodeDecorator, PrefixDecorator, SuffixDecorator
from patternette.core.element import Element, ElementVariant1, ElementVariant2, ELEMENT_VARIANTS
from patternette.core.visitor import Visitor, Visitor1, Visitor2, CountingVisitor
from patternette.core.errors import (
    PatternetteError,
    MissingChildReference,
    NullNodeReference,
    UnhandledElementVariant,
)

# Config and output
from patternette.config import RenderOptions, load_options
from patternette.io.sink import Sink, ConsoleSink, StreamSink, ListSink

# Construction helpers
from patternette.dsl import (
    new_leaf,
    new_leaf_variant2,
    new_composite,
    from_nested,
    render_tree,
    render_lines,
)

# Export all important symbols
__all__ = [
    # Tree
    "Node",
    "Leaf",
    "LeafVariant2",
    "Composite",
    "NodeDecorator",
    "PrefixDecorator",
    "SuffixDecorator",

    # Dispatch
    "Element",
    "ElementVariant1",
    "ElementVariant2",
    "ELEMENT_VARIANTS",
    "Visitor",
    "Visitor1",
    "Visitor2",
    "CountingVisitor",

    # Errors
    "PatternetteError",
    "MissingChildReference",
    "NullNodeReference",
    "UnhandledElementVariant",

    # Config / sinks
    "RenderOptions",
    "load_options",
    "Sink",
    "ConsoleSink",
    "StreamSink",
    "ListSink",

    # Functions
    "new_leaf",
    "new_leaf_variant2",
    "new_composite",
    "from_nested",
    "render_tree",
    "render_lines",
]
