from collections import deque
from typing import Deque, Generator, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from termtree.tree import Tree

# (is last child, node, was-last flag for every ancestor between root and node)
Ancestors = Tuple[bool, ...]
QueueItem = Tuple[bool, "Tree", Ancestors]


def enqueue_children(queue: Deque[QueueItem], parent: "Tree", ancestors: Ancestors):
    """ Pushes the children of parent to the front of the queue, so that the first child is popped next. """
    for i, child in enumerate(reversed(parent.children)):
        queue.appendleft((i == 0, child, ancestors))


def walk(tree: "Tree") -> Generator[QueueItem, None, None]:
    """
    Visits all descendants of tree in pre-order (the root itself is not yielded).

    For this tree:
        0
        ├── 1
        │   ├── 2
        │   └── 3
        └── 4
            └── 5

    Yields:
        (False, 1, ())
        (False, 2, (False,))
        (True,  3, (False,))
        (True,  4, ())
        (True,  5, (True,))

    Uses an explicit queue instead of recursion, so arbitrarily deep trees can be walked.
    All children of a node share the same ancestors tuple.
    """
    queue: Deque[QueueItem] = deque()
    enqueue_children(queue, tree, ())

    while queue:
        last, node, ancestors = queue.popleft()
        yield last, node, ancestors

        if node.children:
            enqueue_children(queue, node, ancestors + (last,))


def iter_nodes(tree: "Tree") -> Generator["Tree", None, None]:
    """ The root followed by all descendants in pre-order. """
    yield tree
    for _, node, _ in walk(tree):
        yield node


def depth(tree: "Tree") -> int:
    """ Number of levels below the root. A single node has depth 0. """
    max_depth = 0
    for _, _, ancestors in walk(tree):
        max_depth = max(max_depth, len(ancestors) + 1)
    return max_depth
