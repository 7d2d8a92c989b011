"""Functional shortcuts over ``GenericTree`` and ``BinarySearchTree``.

Each helper turns its keyword options into a ``TraversalConfig``, runs it
through an ``ExecutionPlan`` on the tree's own adapter and hands back a
plain iterator or dict. The options every helper accepts:

    strategy          member or name ("bfs", "dfs_pre", "in_order", ...)
    min_depth         shallowest depth yielded (the root is depth 0)
    max_depth         deepest depth walked
    include_filter    predicate a yielded node must satisfy
    exclude_filter    predicate that hides a node and, by default, its subtree
    prune_on_exclude  False keeps walking below excluded nodes
    max_nodes         stop after this many yielded nodes
    on_error          callback(node, error); giving one also skips the error

An empty tree produces empty results, but bad options still raise.
"""

from typing import Any, Callable, Dict, Iterator, Tuple

from .base import BaseTree
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .core.node import TreeNode
from .planning import ExecutionPlan

_DEPTH_OPTIONS = ('min_depth', 'max_depth')
_FILTER_OPTIONS = ('include_filter', 'exclude_filter', 'prune_on_exclude')


def traverse_tree(tree: BaseTree, **options) -> Iterator[TreeNode]:
    """Yield the nodes of ``tree`` that the options select.

    Example:
        >>> tree = BinarySearchTree([5, 3, 8])
        >>> [n.value for n in traverse_tree(tree, strategy="bfs")]
        [5, 3, 8]
    """
    for node, _ in collect_tree_data(tree, DataRequirement.FULL_NODE, **options):
        yield node


def collect_tree_data(tree: BaseTree,
                      data_requirement: DataRequirement = DataRequirement.VALUE,
                      **options) -> Iterator[Tuple[TreeNode, Any]]:
    """Yield ``(node, data)`` pairs, ``data`` shaped by ``data_requirement``."""
    config = build_config(data_requirements=data_requirement, **options)
    plan = ExecutionPlan(config, tree.adapter)
    if tree.root is not None:
        yield from plan.execute(tree.root)


def count_nodes(tree: BaseTree, **options) -> int:
    return sum(1 for _ in traverse_tree(tree, **options))


def find_nodes(tree: BaseTree,
               predicate: Callable[[TreeNode], bool],
               **options) -> Iterator[TreeNode]:
    """Yield nodes for which ``predicate(node)`` is true.

    Non-matching nodes are still descended into, so matches deep below
    them are found.
    """
    options['include_filter'] = predicate
    return traverse_tree(tree, **options)


def get_leaf_nodes(tree: BaseTree, **options) -> Iterator[TreeNode]:
    return (node for node in traverse_tree(tree, **options) if node.is_leaf())


def get_tree_stats(tree: BaseTree, **options) -> Dict[str, Any]:
    """Summarize the shape of ``tree``.

    Returns:
        Dict with ``total_nodes``, ``leaf_nodes``, ``internal_nodes``,
        ``max_depth``, ``depths`` (node count per depth) and
        ``average_branching`` (children per internal node, 0 without any)

    Example:
        >>> stats = get_tree_stats(BinarySearchTree([2, 1, 3]))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['max_depth']
        (3, 2, 1)
    """
    depths: Dict[int, int] = {}
    leaves = 0
    children = 0

    for node, depth in collect_tree_data(tree, DataRequirement.DEPTH, **options):
        depths[depth] = depths.get(depth, 0) + 1
        children += node.child_count()
        if node.is_leaf():
            leaves += 1

    total = sum(depths.values())
    internal = total - leaves
    return {
        'total_nodes': total,
        'leaf_nodes': leaves,
        'internal_nodes': internal,
        'max_depth': max(depths, default=0),
        'depths': depths,
        'average_branching': children / internal if internal else 0,
    }


def build_config(**options) -> TraversalConfig:
    """Turn the helpers' keyword options into a ``TraversalConfig``.

    Depth and filter options are gathered into their sub-configs, a
    strategy name is parsed, and everything else must be a
    ``TraversalConfig`` field.

    Raises:
        ValueError: For an unknown strategy name
        TypeError: For an option ``TraversalConfig`` does not have
    """
    depth = DepthConfig(**{key: options.pop(key) for key in _DEPTH_OPTIONS if key in options})
    filters = FilterConfig(**{key: options.pop(key) for key in _FILTER_OPTIONS if key in options})

    if 'strategy' in options:
        options['strategy'] = TraversalStrategy.parse(options['strategy'])
    if options.get('on_error') is not None:
        options.setdefault('skip_errors', True)

    return TraversalConfig(depth=depth, filter=filters, **options)
