import io
import logging
from typing import Any, Callable, TextIO, TYPE_CHECKING

from termtree.glyphs import GlyphPalette
from termtree.iterators import walk
from termtree.utils import split_lines

if TYPE_CHECKING:
    from termtree.tree import Tree

logger = logging.getLogger(__name__)


def check_alignment(glyphs: GlyphPalette, last: bool):
    """ Continuation lines of a multiline node must have the width of its first line prefix. """
    misaligned = glyphs.misaligned(last)
    if misaligned:
        item, skip = misaligned[0]
        raise ValueError(f"Glyphs {item!r} and {skip!r} need to be of same width to render multiline nodes.")


def write_tree(tree: "Tree", out: TextIO, node_renderer: Callable[[Any], str] = str):
    """
    Writes tree line by line to out.

    The connector of a node is drawn with the node's own glyphs, the ancestor columns
    to its left with the glyphs of `tree`. Exceptions raised by out.write abort the
    rendering, lines written so far stay in out.

    :param tree: The root of the tree to render.
    :param out: Anything with a write method accepting strings.
    :param node_renderer: Turns the content of a node into a string.
    """
    logger.debug("Rendering tree rooted at %r", tree.content)
    glyphs = tree.glyphs

    out.write(f"{node_renderer(tree.content)}\n")

    for last, node, ancestors in walk(tree):
        columns = "".join(
            "".join(glyphs.skip(ancestor_last)) for ancestor_last in ancestors
        )
        item, indent = node.glyphs.item(last)

        if not node.multiline:
            out.write(f"{columns}{item}{indent}{node_renderer(node.content)}\n")
            continue

        check_alignment(node.glyphs, last)
        skip, skip_indent = node.glyphs.skip(last)
        lines = split_lines(node_renderer(node.content))

        out.write(f"{columns}{item}{indent}{lines[0]}\n")
        for line in lines[1:]:
            out.write(f"{columns}{skip}{skip_indent}{line}\n")


def format_tree(tree: "Tree", node_renderer: Callable[[Any], str] = str) -> str:
    """ Renders the tree into a string. See write_tree. """
    out = io.StringIO()
    write_tree(tree, out, node_renderer=node_renderer)
    return out.getvalue()
