"""
Conversion between trees and the flat arrays used by tensor tree libraries.

Nodes are stored in pre-order with the root first. For this tree:

    0
    ├── 1
    |   ├── 2
    |   └── 3
    └── 4

parents:      [-1, 0, 1, 1, 0]
descendants:  [ 4, 2, 0, 0, 0]

Arrays may be lists, numpy arrays or torch tensors. torch is only imported
when tensors are requested as output (install with the `torch` extra).
"""
from typing import Any, List, Optional, Sequence, Tuple

from termtree.tree import Tree, LabelType
from termtree.iterators import walk
from termtree.utils import to_list


def parents_from_descendants(descendants: Sequence[int]) -> List[int]:
    descendants = to_list(descendants)

    parents = []
    open_nodes: List[Tuple[int, int]] = []  # (node_idx, idx of its last descendant)
    for node_idx, num_descendants in enumerate(descendants):
        while open_nodes and open_nodes[-1][1] < node_idx:
            open_nodes.pop()

        if node_idx > 0 and not open_nodes:
            raise ValueError(f"Node {node_idx} is outside of the subtree of the root.")

        parents.append(open_nodes[-1][0] if open_nodes else -1)
        open_nodes.append((node_idx, node_idx + num_descendants))

    return parents


def descendants_from_parents(parents: Sequence[int]) -> List[int]:
    parents = to_list(parents)

    descendants = [0] * len(parents)
    # children come after their parent, so walking backwards finishes every subtree first
    for node_idx in range(len(parents) - 1, 0, -1):
        descendants[parents[node_idx]] += descendants[node_idx] + 1

    return descendants


def tree_from_array(
        parents: Optional[Sequence[int]] = None,
        descendants: Optional[Sequence[int]] = None,
        node_data: Optional[Sequence[LabelType]] = None,
) -> Tree:
    """
    Builds a tree from either a parents or a descendants array.

    :param node_data: The content of each node. Defaults to the node indices.
    """
    if parents is None and descendants is None:
        raise ValueError("Either parents or descendants must be passed")

    parents = parents_from_descendants(descendants) if parents is None else to_list(parents)
    node_data = list(range(len(parents))) if node_data is None else to_list(node_data)

    if len(parents) != len(node_data):
        raise ValueError(f"All arrays need to be of same length and not ({len(parents)}, {len(node_data)}).")

    if not parents or parents[0] != -1:
        raise ValueError("Parents array seems to have wrong format.")

    nodes = [Tree.root(data) for data in node_data]
    for node_idx, parent_idx in enumerate(parents[1:], start=1):
        if not 0 <= parent_idx < node_idx:
            raise ValueError(
                f"Node {node_idx} has parent {parent_idx}, but nodes need to be in pre-order with the root first."
            )
        nodes[parent_idx].push(nodes[node_idx])

    return nodes[0]


def tree_to_array(tree: Tree, return_tensors: bool = False) -> Tuple[Any, Any, List[LabelType]]:
    """
    Inverse of tree_from_array. Returns parents, descendants and node_data in pre-order.

    :param return_tensors: Return parents and descendants as torch.LongTensor instead of lists.
    """
    parents = [-1]
    node_data = [tree.content]

    # index of the most recent node at each level
    level_idx = [0]
    for _, node, ancestors in walk(tree):
        level = len(ancestors) + 1
        del level_idx[level:]

        parents.append(level_idx[level - 1])
        level_idx.append(len(node_data))
        node_data.append(node.content)

    descendants = descendants_from_parents(parents)

    if return_tensors:
        import torch
        return torch.tensor(parents, dtype=torch.long), torch.tensor(descendants, dtype=torch.long), node_data

    return parents, descendants, node_data
