import io

import pytest

from patternette import (
    Composite,
    LeafVariant2,
    NullNodeReference,
    StreamSink,
    from_nested,
    new_composite,
    new_leaf,
    new_leaf_variant2,
    render_lines,
    render_tree,
)


def test_builders_match_manual_construction():
    root = new_composite(new_leaf(), new_leaf(), new_composite(new_leaf_variant2()))
    assert isinstance(root, Composite)
    assert render_lines(root) == ["3 children", "Leaf", "Leaf", "1 children", "Leaf2"]


def test_from_nested():
    root = from_nested(["leaf", "leaf:x", ["leaf2", []]])
    assert render_lines(root) == [
        "3 children",
        "Leaf",
        "Leaf x",
        "2 children",
        "Leaf2",
        "0 children",
    ]
    assert isinstance(root.get_children()[2].get_children()[0], LeafVariant2)


@pytest.mark.parametrize("shape", [["tree"], [1], "leaf"])
def test_from_nested_rejects_unknown_tokens(shape):
    with pytest.raises(ValueError):
        from_nested(shape)


def test_render_tree_none_root():
    with pytest.raises(NullNodeReference):
        render_tree(None)


def test_render_tree_to_stream():
    buf = io.StringIO()
    render_tree(new_composite(new_leaf()), StreamSink(buf))
    assert buf.getvalue() == "1 children\nLeaf\n"


def test_render_tree_defaults_to_console(capsys):
    render_tree(new_composite(new_leaf_variant2()))
    out = capsys.readouterr().out
    assert out.splitlines() == ["1 children", "Leaf2"]
