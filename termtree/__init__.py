from termtree.glyphs import GlyphPalette, DEFAULT, ASCII, CONT, CONT_ROUND, DOUBLE
from termtree.tree import Tree, LabelType, tree
from termtree.iterators import walk, iter_nodes
from termtree.render import write_tree, format_tree
from termtree.integrations import (
    parents_from_descendants, descendants_from_parents, tree_from_array, tree_to_array
)
