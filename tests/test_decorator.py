import pytest

from patternette import (
    Composite,
    Leaf,
    NodeDecorator,
    NullNodeReference,
    PrefixDecorator,
    SuffixDecorator,
    render_lines,
)


def test_plain_decorator_is_transparent():
    leaf = Leaf("x")
    assert render_lines(NodeDecorator(leaf)) == render_lines(leaf)


def test_stacked_prefixes_render_outermost_first():
    node = PrefixDecorator(PrefixDecorator(Leaf("coffee"), "+ honey"), "+ milk")
    assert render_lines(node) == ["+ milk", "+ honey", "Leaf coffee"]
    assert node.unwrap().name == "coffee"


def test_stacked_suffixes_render_innermost_first():
    node = SuffixDecorator(SuffixDecorator(Leaf("coffee"), "+ honey"), "+ milk")
    assert render_lines(node) == ["Leaf coffee", "+ honey", "+ milk"]
    assert node.unwrap().name == "coffee"


def test_prefix_and_suffix_mix():
    node = PrefixDecorator(SuffixDecorator(Leaf(), "after"), "before")
    assert render_lines(node) == ["before", "Leaf", "after"]


def test_decorated_node_inside_composite():
    root = Composite([PrefixDecorator(Leaf(), "*")])
    assert render_lines(root) == ["1 children", "*", "Leaf"]


def test_decorating_none_fails_fast():
    with pytest.raises(NullNodeReference):
        NodeDecorator(None)
