import io

from bintree.metrics import height
from bintree.node import Node
from bintree.printing import print_tree, render


def _attach(parent, value, side):
    child = Node(value, parent=parent)
    setattr(parent, side, child)
    return child


def _example():
    root = Node(98)
    left = _attach(root, 12, "left")
    _attach(left, 6, "left")
    _attach(left, 16, "right")
    right = _attach(root, 402, "right")
    _attach(right, 256, "left")
    _attach(right, 512, "right")
    return root


EXPECTED = (
    "       .-------(098)-------.\n"
    "  .--(012)--.         .--(402)--.\n"
    "(006)     (016)     (256)     (512)"
)


def test_render_none_is_empty():
    assert render(None) == ""


def test_render_single_node():
    assert render(Node(98)) == "(098)"


def test_render_example_tree():
    assert render(_example()) == EXPECTED


def test_row_count_matches_height():
    root = _example()
    root.insert_left(54)
    assert len(render(root).split("\n")) == height(root) + 1


def test_every_label_present_and_no_trailing_spaces():
    root = _example()
    root.right.insert_right(128)
    text = render(root)
    for value in (98, 12, 6, 16, 402, 256, 512, 128):
        assert f"({value:03d})" in text
    for line in text.split("\n"):
        assert line == line.rstrip(" ")


def test_labels_on_their_depth_row():
    root = _example()
    lines = render(root).split("\n")
    assert lines[root.left.left.depth()].startswith(f"({root.left.left.value:03d})")
    assert f"({root.value:03d})" in lines[root.depth()]


def test_print_tree_writes_rendered_lines():
    root = _example()
    buffer = io.StringIO()
    print_tree(root, buffer)
    assert buffer.getvalue() == render(root) + "\n"


def test_print_tree_none_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(_example())
    assert capsys.readouterr().out == EXPECTED + "\n"


def test_negative_value_label():
    root = Node(-5)
    assert render(root) == f"({-5:03d})"