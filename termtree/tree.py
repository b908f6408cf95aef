import sys
from copy import deepcopy
from typing import Any, Callable, Generator, Iterable, List, Optional, TextIO, Tuple

from termtree.glyphs import GlyphPalette
from termtree.iterators import iter_nodes, depth
from termtree.render import format_tree, write_tree


# Define a type alias for the content of a node
LabelType = Any


def tree(content: LabelType, children: Optional[Iterable[Any]] = None) -> "Tree":
    """ Constructor to build a tree. """

    return Tree(content, children)


class Tree:
    """
    A node with content and an ordered list of children, which renders itself
    in a tree-like format:

    >>> print(Tree("foo", [Tree.root("bar"), Tree("baz", ["qux"])]), end="")
    foo
    ├── bar
    └── baz
        └── qux
    """

    @classmethod
    def root(cls, content: LabelType) -> "Tree":
        """ A single node without children. """
        return cls(content)

    @classmethod
    def from_array(cls, parents=None, descendants=None, node_data=None) -> "Tree":
        """ Obtain a tree from arrays. A tree can be either defined by a parents or a descendants array.
        Additional node_data can be passed, it will be used as content of the nodes.
        """
        from termtree.integrations import tree_from_array
        return tree_from_array(parents=parents, descendants=descendants, node_data=node_data)

    def __init__(
            self, content: LabelType, children: Optional[Iterable[Any]] = None,
            multiline: bool = False, glyphs: Optional[GlyphPalette] = None,
    ):
        """
        :param content: Anything that can be rendered to a string.
        :param children: Trees or plain values, the latter become leaves.
        :param multiline: Prefix every line of content, not only the first.
        :param glyphs: The glyphs to draw the connector of this node.
        """
        self.content = content
        self.children: List[Tree] = []
        self.multiline = multiline
        self.glyphs = GlyphPalette() if glyphs is None else glyphs

        if children is not None:
            self.extend(children)

    def __len__(self):
        """ The number of nodes in this tree. """
        return sum(1 for _ in iter_nodes(self))

    def __iter__(self) -> Generator["Tree", None, None]:
        """ Iterates over this node and all its descendants in pre-order. """
        return iter_nodes(self)

    def __str__(self):
        return self.pformat()

    def __repr__(self):
        return f"Tree({self.content!r}, children={len(self.children)}, multiline={self.multiline})"

    def __deepcopy__(self, memo):
        # build the copy iteratively, deep trees would exceed the recursion limit otherwise
        def copy_node(node: Tree) -> Tree:
            return type(node)(deepcopy(node.content, memo), multiline=node.multiline, glyphs=node.glyphs)

        root = copy_node(self)
        memo[id(self)] = root
        stack: List[Tuple[Tree, Tree]] = [(self, root)]
        while stack:
            original, copied = stack.pop()
            for child in original.children:
                copied_child = copy_node(child)
                copied.children.append(copied_child)
                stack.append((child, copied_child))

        return root

    def clone(self) -> "Tree":
        """ Returns a deep copy of this tree. copy.copy and copy.deepcopy do the same,
        a shallow copy would share its children with this tree.
        """
        return deepcopy(self)

    __copy__ = clone

    def is_leaf(self) -> bool:
        return not self.children

    def depth(self) -> int:
        """ Number of levels below this node. """
        return depth(self)

    # in place modifications, return self for chaining
    def set_multiline(self, yes: bool) -> "Tree":
        """ Ensure all lines of content are indented. """
        self.multiline = yes
        return self

    def set_glyphs(self, glyphs: GlyphPalette) -> "Tree":
        """ Customize the rendering of this node. """
        self.glyphs = glyphs
        return self

    def push(self, child: Any) -> "Tree":
        """
        Appends a child. Values that are not a Tree become leaves.

        A Tree is appended as is and from now on belongs to this tree, don't keep using it
        elsewhere. Use with_child to append a copy.
        """
        self.children.append(child if isinstance(child, Tree) else Tree.root(child))
        return self

    def extend(self, children: Iterable[Any]) -> "Tree":
        """ Appends many children. Values that are not a Tree become leaves. See push. """
        for child in children:
            self.push(child)
        return self

    # functions below return a modified copy and leave this tree and their arguments untouched
    def with_multiline(self, yes: bool) -> "Tree":
        return self.clone().set_multiline(yes)

    def with_glyphs(self, glyphs: GlyphPalette) -> "Tree":
        return self.clone().set_glyphs(glyphs)

    def with_child(self, child: Any) -> "Tree":
        return self.clone().push(_copy_child(child))

    def with_children(self, children: Iterable[Any]) -> "Tree":
        return self.clone().extend(_copy_child(child) for child in children)

    def to_array(self, return_tensors: bool = False) -> Tuple[Any, Any, List[LabelType]]:
        """ Returns parents, descendants and node_data of this tree in pre-order. """
        from termtree.integrations import tree_to_array
        return tree_to_array(self, return_tensors=return_tensors)

    # pretty printing
    def render(self, out: TextIO, node_renderer: Callable[[Any], str] = str):
        """
        Writes this tree to out, one line at a time.

        :param out: A text sink, for example a file or io.StringIO.
        :param node_renderer: A function that outputs a string for the content of a node.
        """
        write_tree(self, out, node_renderer=node_renderer)

    def pformat(self, node_renderer: Callable[[Any], str] = str) -> str:
        """
        Renders this tree into a string. Define a node_renderer for custom content types (e.g. Dictionaries).
        :param node_renderer: A function that outputs a string.
        :return:
        """
        return format_tree(self, node_renderer=node_renderer)

    def pprint(self, node_renderer: Callable[[Any], str] = str, file: Optional[TextIO] = None):
        """ See pformat for description of arguments."""
        self.render(sys.stdout if file is None else file, node_renderer=node_renderer)


def _copy_child(child: Any) -> Any:
    return child.clone() if isinstance(child, Tree) else child
