"""Composite demo: build a small part-whole tree and render it pre-order."""

from patternette import Composite, Leaf, LeafVariant2, render_tree
from patternette.utils.logging import show_tree

root = Composite(name="root")
root.add(Leaf()).add(Leaf())
child = Composite(name="child")
root.add(child)
child.add(LeafVariant2())

if __name__ == "__main__":
    render_tree(root)  # 3 children / Leaf / Leaf / 1 children / Leaf2
    show_tree(root)
