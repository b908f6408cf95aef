import io

import pytest

import termtree
from termtree import Tree, GlyphPalette, format_tree, write_tree


CUSTOM = GlyphPalette(
    middle_item="+", last_item="\\", item_indent="-- ",
    middle_skip=":", last_skip=".", skip_indent="...",
)


def test_render_tree_root():
    tree = Tree.root("foo")
    assert str(tree) == "foo\n"


def test_render_tree_with_leaves():
    tree = Tree("foo", [Tree("bar", [Tree.root("baz")])])
    assert str(tree) == (
        "foo\n"
        "└── bar\n"
        "    └── baz\n"
    )


def test_render_tree_with_multiple_leaves():
    tree = Tree("foo", [Tree.root("bar"), Tree.root("baz")])
    assert str(tree) == (
        "foo\n"
        "├── bar\n"
        "└── baz\n"
    )


def test_render_tree_with_multiline_leaf():
    tree = Tree("foo", [
        Tree.root("hello\nworld").with_multiline(True),
        Tree.root("goodbye\nworld").with_multiline(True),
    ])
    assert str(tree) == (
        "foo\n"
        "├── hello\n"
        "|   world\n"
        "└── goodbye\n"
        "    world\n"
    )


def test_render_nested_multiline():
    tree = Tree("r", [
        Tree("a\nb", [Tree.root("c\nd").set_multiline(True)], multiline=True),
        "z",
    ])
    assert str(tree) == (
        "r\n"
        "├── a\n"
        "|   b\n"
        "|   └── c\n"
        "|       d\n"
        "└── z\n"
    )


def test_render_mixed_columns():
    tree = Tree("root", [
        Tree("a", [
            Tree("b", ["c"]),
            "d",
        ]),
        Tree("e", [
            Tree("f", ["g", "h"]),
        ]),
    ])
    assert str(tree) == (
        "root\n"
        "├── a\n"
        "|   ├── b\n"
        "|   |   └── c\n"
        "|   └── d\n"
        "└── e\n"
        "    └── f\n"
        "        ├── g\n"
        "        └── h\n"
    )


def test_embedded_newline_without_multiline_is_not_prefixed():
    tree = Tree("foo", ["a\nb", "c"])
    assert str(tree) == (
        "foo\n"
        "├── a\n"
        "b\n"
        "└── c\n"
    )


def test_root_content_passes_through():
    tree = Tree("line one\nline two", ["child"], multiline=True)
    assert str(tree) == "line one\nline two\n└── child\n"


def test_multiline_edge_cases():
    tree = Tree("foo", [
        Tree.root("").set_multiline(True),
        Tree.root("trailing\n").set_multiline(True),
        Tree.root("windows\r\nlines").set_multiline(True),
    ])
    assert str(tree) == (
        "foo\n"
        "├── \n"
        "├── trailing\n"
        "|   \n"
        "└── windows\n"
        "    lines\n"
    )


def number_of_lines(tree: Tree) -> int:
    lines = 1
    for _, node, _ in termtree.walk(tree):
        lines += 1
        if node.multiline:
            lines += str(node.content).count("\n")
    return lines


def test_line_count():
    tree = Tree("root", [
        Tree("one\ntwo\nthree", ["x", Tree("y\nz", ["w"], multiline=True)], multiline=True),
        "single",
        Tree("not multiline", [Tree.root("a\nb\nc").set_multiline(True)]),
    ])
    rendered = str(tree)

    assert rendered.endswith("\n")
    assert rendered.count("\n") == number_of_lines(tree) == 13


def test_rendering_is_idempotent():
    tree = Tree("foo", [Tree("bar", ["baz\nqux"], multiline=True), "quux"])
    assert str(tree) == str(tree)
    assert tree.pformat() == format_tree(tree)


def test_rendering_does_not_modify_tree():
    tree = Tree("foo", [Tree("bar", ["baz"]), "quux"])
    children = list(tree.children)
    str(tree)

    assert tree.children == children
    assert [node.content for node in tree] == ["foo", "bar", "baz", "quux"]


def test_order_preservation():
    tree = Tree("foo", ["a", "b", "c"])
    assert str(tree) == "foo\n├── a\n├── b\n└── c\n"

    tree.children.reverse()
    assert str(tree) == "foo\n├── c\n├── b\n└── a\n"


def test_node_glyphs_only_change_own_connector():
    tree = Tree("foo", [
        Tree("a", ["b"], glyphs=CUSTOM),
        "c",
    ])
    assert str(tree) == (
        "foo\n"
        "+-- a\n"
        "|   └── b\n"
        "└── c\n"
    )


def test_ancestor_columns_use_root_glyphs():
    tree = Tree("foo", [
        Tree("a", [Tree("b", ["c"])]),
        "d",
    ], glyphs=CUSTOM)
    assert str(tree) == (
        "foo\n"
        "├── a\n"
        ":...└── b\n"
        ":.......└── c\n"
        "└── d\n"
    )


def test_multiline_continuation_uses_own_glyphs():
    tree = Tree("foo", [
        Tree("a\nb", ["c"], multiline=True, glyphs=CUSTOM),
        Tree("d\ne", multiline=True, glyphs=CUSTOM),
    ])
    assert str(tree) == (
        "foo\n"
        "+-- a\n"
        ":...b\n"
        "|   └── c\n"
        "\\-- d\n"
        "....e\n"
    )


def test_cont_round_style():
    tree = Tree(0, [Tree(1, [2, 3]), 4])
    for node in tree:
        node.set_glyphs(termtree.CONT_ROUND)

    assert str(tree) == (
        "0\n"
        "├── 1\n"
        "│   ├── 2\n"
        "│   ╰── 3\n"
        "╰── 4\n"
    )


def test_ascii_style():
    tree = Tree(0, [Tree(1, [2, 3]), 4])
    for node in tree:
        node.set_glyphs(termtree.ASCII)

    assert str(tree) == (
        "0\n"
        "|-- 1\n"
        "|   |-- 2\n"
        "|   `-- 3\n"
        "`-- 4\n"
    )


def test_misaligned_multiline_glyphs():
    glyphs = GlyphPalette(last_item="└─")
    tree = Tree("foo", [Tree.root("a\nb").set_multiline(True).set_glyphs(glyphs)])

    with pytest.raises(ValueError, match="same width"):
        str(tree)

    tree.children[0].set_multiline(False)
    assert str(tree) == "foo\n└─── a\nb\n"


def test_misaligned_indent_glyphs():
    glyphs = GlyphPalette(item_indent="─ ")
    tree = Tree("foo", [Tree.root("a\nb").set_multiline(True).set_glyphs(glyphs), "c"])

    with pytest.raises(ValueError, match="same width"):
        str(tree)


def test_only_relevant_glyphs_are_checked():
    # the last child never uses middle_item, so its width does not matter
    glyphs = GlyphPalette(middle_item="├─")
    tree = Tree("foo", [Tree.root("a\nb").set_multiline(True).set_glyphs(glyphs)])
    assert str(tree) == "foo\n└── a\n    b\n"


def test_node_renderer():
    tree = Tree({"name": "foo"}, [Tree({"name": "bar"}), Tree({"name": "baz"})])
    assert tree.pformat(node_renderer=lambda node: node["name"]) == "foo\n├── bar\n└── baz\n"


def test_render_to_sink():
    tree = Tree("foo", ["bar", "baz"])
    out = io.StringIO()

    assert tree.render(out) is None
    assert out.getvalue() == "foo\n├── bar\n└── baz\n"


class FailingSink:

    def __init__(self, fail_after: int):
        self.fail_after = fail_after
        self.written = []

    def write(self, text: str):
        if len(self.written) >= self.fail_after:
            raise OSError("disk full")
        self.written.append(text)


def test_sink_failure_aborts_rendering():
    tree = Tree("foo", ["a", "b", "c", "d"])
    sink = FailingSink(fail_after=2)

    with pytest.raises(OSError, match="disk full"):
        write_tree(tree, sink)

    assert sink.written == ["foo\n", "├── a\n"]


def test_deep_tree():
    depth = 5000
    tree = Tree.root(0)
    node = tree
    for i in range(1, depth + 1):
        child = Tree.root(i)
        node.push(child)
        node = child

    lines = str(tree).splitlines()

    assert len(lines) == depth + 1
    assert lines[1] == "└── 1"
    assert lines[-1] == " " * 4 * (depth - 1) + f"└── {depth}"
