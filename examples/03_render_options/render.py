"""Render the catalogue tree with options loaded from YAML."""

from pathlib import Path

from patternette import load_options, render_tree
from patternette.demos import build_demo_tree
from patternette.utils.logging import show_tree

opts = load_options(Path(__file__).with_name("render.yml"))

if __name__ == "__main__":
    root = build_demo_tree()
    render_tree(root, opts=opts)
    show_tree(root, opts=opts)
