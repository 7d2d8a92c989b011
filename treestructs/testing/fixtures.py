"""Test fixtures for treestructs consumers.

These helpers give tests a stable, comparable picture of a tree's shape
without reaching into node internals.
"""

from typing import Any, Iterable, Optional, Tuple

from ..base import BaseTree
from ..config import TreeConfig
from ..core.node import TreeNode, BinaryNode
from ..generic import GenericTree


def tree_shape(tree: BaseTree) -> Optional[Tuple[Any, ...]]:
    """Describe a tree's shape as nested tuples.

    A node becomes ``(value, child_shape, ...)`` using the adapter's child
    order. Binary nodes always report both sides, with None for an absent
    child, so a left-only and a right-only child compare different.

    Returns:
        Nested tuples for the whole tree, or None if it is empty

    Example:
        >>> tree_shape(BinarySearchTree([2, 1]))
        (2, (1, None, None), None)
    """
    if tree.root is None:
        return None

    # Post-order over an explicit stack so deep chains don't recurse
    built = {}
    stack = [(tree.root, False)]
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in _shape_children(node) if child is not None)
            continue
        built[id(node)] = (node.value,) + tuple(
            built[id(child)] if child is not None else None
            for child in _shape_children(node)
        )
    return built[id(tree.root)]


def _shape_children(node: TreeNode) -> Tuple[Optional[TreeNode], ...]:
    if isinstance(node, BinaryNode):
        return (node.left, node.right)
    return node.children


def build_generic_tree(edges: Iterable[Tuple[Any, Any]],
                       config: Optional[TreeConfig] = None) -> GenericTree:
    """Build a GenericTree from ``(value, parent_value)`` pairs, in order.

    The first pair's parent value is ignored because it becomes the root.

    Example:
        >>> list(build_generic_tree([(1, None), (2, 1), (3, 1)]))
        [1, 2, 3]
    """
    tree = GenericTree(config=config)
    for value, parent_value in edges:
        tree.add(value, parent_value)
    return tree
