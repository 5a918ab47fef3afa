import pytest

from patternette import ListSink
from patternette.demos import DEMOS, build_demo_tree, get_demo, register_demo
from patternette.utils.validate import find_tree_issues


def test_builtin_demos_registered():
    assert list(DEMOS) == ["composite", "visitor", "decorator"]
    assert all(demo.summary for demo in DEMOS.values())


def test_composite_demo_output():
    sink = ListSink()
    get_demo("composite").run(sink)
    assert sink.lines == [
        "4 children",
        "Leaf",
        "Leaf",
        "Leaf2",
        "2 children",
        "Leaf",
        "Leaf2",
    ]


def test_visitor_demo_output():
    sink = ListSink()
    get_demo("visitor").run(sink)
    assert sink.lines == [
        "ConcreteVisitor1 visit concrete element1",
        "ConcreteVisitor2 visit concrete element1",
        "ConcreteVisitor1 visit concrete element2",
        "ConcreteVisitor2 visit concrete element2",
    ]


def test_decorator_demo_output():
    sink = ListSink()
    get_demo("decorator").run(sink)
    assert sink.lines == [
        "Leaf coffee",
        "Leaf coffee",
        "+ honey",
        "Leaf coffee",
        "+ honey",
        "+ milk",
    ]


def test_demo_tree_is_valid():
    assert find_tree_issues(build_demo_tree()) == []


def test_unknown_and_duplicate_demo():
    with pytest.raises(KeyError):
        get_demo("singleton")
    with pytest.raises(ValueError):
        register_demo("composite")(lambda sink, opts: None)
