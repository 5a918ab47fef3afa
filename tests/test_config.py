import textwrap

import pytest
from pydantic import ValidationError

from patternette import Composite, Leaf, LeafVariant2, RenderOptions, load_options, render_lines


def test_defaults():
    opts = RenderOptions()
    assert opts.count_line(0) == "0 children"
    assert opts.prefix(3) == ""


def test_count_template_must_contain_count():
    with pytest.raises(ValidationError):
        RenderOptions(count_template="Size")


def test_unknown_option_rejected():
    with pytest.raises(ValidationError):
        RenderOptions(colour="red")


def test_custom_labels_change_output():
    opts = RenderOptions(count_template="Size:{count}", leaf_label="L", leaf2_label="L2")
    root = Composite([Leaf(), LeafVariant2()])
    assert render_lines(root, opts) == ["Size:2", "L", "L2"]


def test_load_options_from_yaml(tmp_path):
    yml = textwrap.dedent(
        """
        count_template: "Size:{count}"
        indent: "--"
        max_children: 3
        """
    )
    file = tmp_path / "render.yml"
    file.write_text(yml)
    opts = load_options(file)
    assert opts.count_template == "Size:{count}"
    assert opts.indent == "--"
    assert opts.max_children == 3


def test_load_options_empty_file(tmp_path):
    file = tmp_path / "empty.yml"
    file.write_text("")
    assert load_options(file) == RenderOptions()


def test_load_options_invalid(tmp_path):
    bad = tmp_path / "bad.yml"
    bad.write_text("max_children: 0\n")
    with pytest.raises(ValidationError):
        load_options(bad)

    not_a_mapping = tmp_path / "list.yml"
    not_a_mapping.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_options(not_a_mapping)


@pytest.mark.parametrize(
    "template",
    ["{count} children of {parent}", "{count} {}", "{count} {0}", "{count} {"],
)
def test_count_template_with_other_fields_rejected(template):
    with pytest.raises(ValidationError):
        RenderOptions(count_template=template)


def test_count_template_with_other_fields_rejected_from_yaml(tmp_path):
    file = tmp_path / "render.yml"
    file.write_text('count_template: "{count} children of {parent}"\n')
    with pytest.raises(ValidationError):
        load_options(file)
