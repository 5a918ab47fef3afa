from patternette import Composite, Leaf, Visitor, Visitor1, CountingVisitor
from patternette.utils.validate import find_tree_issues, missing_handlers


def test_clean_tree_has_no_issues():
    root = Composite([Leaf(), Composite([Leaf()])])
    assert find_tree_issues(root) == []


def test_self_containment_is_reported_as_cycle():
    root = Composite(name="loop")
    root.add(root)  # add() deliberately does not check
    assert find_tree_issues(root) == [("cycle", "Composite loop")]


def test_mutual_containment_is_reported():
    a = Composite(name="a")
    b = Composite(name="b")
    a.add(b)
    b.add(a)
    assert ("cycle", "Composite a") in find_tree_issues(a)


def test_shared_node_is_reported_once():
    leaf = Leaf("shared")
    root = Composite([leaf, Composite([leaf]), leaf])
    assert find_tree_issues(root) == [("shared", "Leaf shared")]


def test_missing_handlers():
    class Half(Visitor):
        def visit_element_variant1(self, element):
            pass

    assert missing_handlers(Half) == ["visit_element_variant2"]
    assert missing_handlers(Visitor) == ["visit_element_variant1", "visit_element_variant2"]
    assert missing_handlers(Visitor1) == []
    assert missing_handlers(CountingVisitor) == []
