"""Tests for the high-level API and ExecutionPlan.

Covers the functional helpers over both tree kinds, configuration
validation, capability checks and error handling during execution.
"""

import logging
import sys
import unittest
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treestructs import (
    BinarySearchTree,
    GenericTree,
    GenericTreeAdapter,
    BinaryTreeAdapter,
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
    ExecutionPlan,
    InvalidConfigError,
    CapabilityMismatchError,
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)
from treestructs.core.collector import CustomCollector
from treestructs.core.traverser import DepthFirstPostOrderTraverser
from treestructs.testing import build_generic_tree


def make_generic():
    """Build a small generic tree.

    Structure:
    1
    ├── 2
    │   ├── 4
    │   └── 5
    └── 3
        └── 6
    """
    return build_generic_tree([(1, None), (2, 1), (3, 1), (4, 2), (5, 2), (6, 3)])


class TestTraverseTree(unittest.TestCase):
    """Test traverse_tree and its thin wrappers."""

    def test_default_is_pre_order(self):
        values = [n.value for n in traverse_tree(make_generic())]
        self.assertEqual(values, [1, 2, 4, 5, 3, 6])

    def test_strategy_by_name(self):
        values = [n.value for n in traverse_tree(make_generic(), strategy="bfs")]
        self.assertEqual(values, [1, 2, 3, 4, 5, 6])

    def test_in_order_on_bst(self):
        tree = BinarySearchTree([5, 3, 8, 1, 4, 7, 9])
        values = [n.value for n in traverse_tree(tree, strategy=TraversalStrategy.IN_ORDER)]
        self.assertEqual(values, [1, 3, 4, 5, 7, 8, 9])

    def test_in_order_on_generic_tree_is_rejected(self):
        with self.assertRaises(CapabilityMismatchError):
            list(traverse_tree(make_generic(), strategy="in_order"))

    def test_unknown_strategy(self):
        with self.assertRaises(ValueError):
            list(traverse_tree(make_generic(), strategy="spiral"))

    def test_depth_limits(self):
        values = [n.value for n in traverse_tree(make_generic(), min_depth=1, max_depth=1)]
        self.assertEqual(values, [2, 3])

    def test_filters(self):
        tree = make_generic()
        even = [n.value for n in traverse_tree(tree, include_filter=lambda n: n.value % 2 == 0)]
        self.assertEqual(even, [2, 4, 6])

        no_twos = [n.value for n in traverse_tree(tree, exclude_filter=lambda n: n.value == 2)]
        self.assertEqual(no_twos, [1, 3, 6])

    def test_exclusion_without_pruning(self):
        values = [n.value for n in traverse_tree(
            make_generic(),
            exclude_filter=lambda n: n.value == 2,
            prune_on_exclude=False,
        )]
        self.assertEqual(values, [1, 4, 5, 3, 6])

    def test_excluded_subtree_is_never_walked(self):
        tree = build_generic_tree([("r", None), ("skip", "r"), ("kid", "skip"), ("b", "r")])
        reached = []

        def exclude(node):
            reached.append(node.value)
            return node.value == "skip"

        values = [n.value for n in traverse_tree(tree, exclude_filter=exclude)]
        self.assertEqual(values, ["r", "b"])
        self.assertNotIn("kid", reached)

    def test_pruning_applies_to_every_strategy(self):
        tree = BinarySearchTree([5, 3, 8, 1, 4, 7, 9])
        for strategy in ("bfs", "dfs_pre", "dfs_post", "level", "in_order"):
            values = sorted(n.value for n in traverse_tree(
                tree, strategy=strategy, exclude_filter=lambda n: n.value == 3))
            self.assertEqual(values, [5, 7, 8, 9], strategy)

    def test_include_filter_does_not_prune(self):
        # 1 fails the filter, its descendants are still reached
        values = [n.value for n in find_nodes(make_generic(), lambda n: n.value != 1)]
        self.assertEqual(values, [2, 4, 5, 3, 6])

    def test_unknown_option(self):
        with self.assertRaises(TypeError):
            list(traverse_tree(make_generic(), max_dpeth=1))

    def test_max_nodes(self):
        values = [n.value for n in traverse_tree(make_generic(), max_nodes=3)]
        self.assertEqual(values, [1, 2, 4])

    def test_empty_tree_yields_nothing(self):
        self.assertEqual(list(traverse_tree(GenericTree())), [])
        self.assertEqual(list(traverse_tree(BinarySearchTree(), strategy="in_order")), [])

    def test_count_nodes(self):
        self.assertEqual(count_nodes(make_generic()), 6)
        self.assertEqual(count_nodes(make_generic(), max_depth=1), 3)
        self.assertEqual(count_nodes(BinarySearchTree()), 0)

    def test_find_nodes(self):
        found = [n.value for n in find_nodes(make_generic(), lambda n: n.value > 3)]
        self.assertEqual(found, [4, 5, 6])

    def test_get_leaf_nodes(self):
        leaves = [n.value for n in get_leaf_nodes(make_generic())]
        self.assertEqual(leaves, [4, 5, 6])


class TestCollectTreeData(unittest.TestCase):
    """Test collect_tree_data with each data requirement."""

    def test_values(self):
        data = [d for _, d in collect_tree_data(BinarySearchTree([2, 1, 3]), strategy="in_order")]
        self.assertEqual(data, [1, 2, 3])

    def test_depth(self):
        data = [d for _, d in collect_tree_data(make_generic(), DataRequirement.DEPTH)]
        self.assertEqual(data, [0, 1, 2, 2, 1, 2])

    def test_metadata(self):
        (_, meta), = collect_tree_data(make_generic(), DataRequirement.METADATA, max_depth=0)
        self.assertEqual(meta, {'value': 1, 'type': 'GenericNode', 'children': 2})

    def test_children_count(self):
        data = {d['value']: d['child_count']
                for _, d in collect_tree_data(make_generic(), DataRequirement.CHILDREN_COUNT)}
        self.assertEqual(data, {1: 2, 2: 2, 3: 1, 4: 0, 5: 0, 6: 0})

    def test_full_node(self):
        tree = make_generic()
        node, data = next(collect_tree_data(tree, DataRequirement.FULL_NODE))
        self.assertIs(node, tree.root)
        self.assertIs(data, tree.root)


class TestTreeStats(unittest.TestCase):
    """Test get_tree_stats."""

    def test_generic_stats(self):
        stats = get_tree_stats(make_generic())
        self.assertEqual(stats['total_nodes'], 6)
        self.assertEqual(stats['leaf_nodes'], 3)
        self.assertEqual(stats['internal_nodes'], 3)
        self.assertEqual(stats['max_depth'], 2)
        self.assertEqual(stats['depths'], {0: 1, 1: 2, 2: 3})
        self.assertAlmostEqual(stats['average_branching'], 5 / 3)

    def test_chain_stats(self):
        stats = get_tree_stats(BinarySearchTree(range(5)))
        self.assertEqual(stats['max_depth'], 4)
        self.assertEqual(stats['leaf_nodes'], 1)
        self.assertEqual(stats['average_branching'], 1)

    def test_empty_stats(self):
        stats = get_tree_stats(GenericTree())
        self.assertEqual(stats['total_nodes'], 0)
        self.assertEqual(stats['average_branching'], 0)


class TestExecutionPlan(unittest.TestCase):
    """Test plan validation and execution."""

    def test_invalid_depth_config(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=3, max_depth=1))
        with self.assertRaises(InvalidConfigError) as ctx:
            ExecutionPlan(config, GenericTreeAdapter())
        self.assertIn("max_depth cannot be less than min_depth", str(ctx.exception))

    def test_invalid_config_is_also_value_error(self):
        with self.assertRaises(ValueError):
            ExecutionPlan(TraversalConfig(max_nodes=0), GenericTreeAdapter())

    def test_custom_strategy_requires_traverser(self):
        config = TraversalConfig(strategy=TraversalStrategy.CUSTOM)
        with self.assertRaises(InvalidConfigError):
            ExecutionPlan(config, GenericTreeAdapter())

    def test_custom_traverser_and_collector(self):
        adapter = GenericTreeAdapter()
        config = TraversalConfig(
            strategy=TraversalStrategy.CUSTOM,
            custom_traverser=DepthFirstPostOrderTraverser(adapter),
            data_requirements=DataRequirement.CUSTOM,
            custom_collector=CustomCollector(adapter, lambda node, depth: f"{node.value}@{depth}"),
        )
        plan = ExecutionPlan(config, adapter)
        data = [d for _, d in plan.execute(make_generic().root)]
        self.assertEqual(data, ["4@2", "5@2", "2@1", "6@2", "3@1", "1@0"])

    def test_in_order_capability_check(self):
        config = TraversalConfig.sorted_values()
        with self.assertRaises(CapabilityMismatchError):
            ExecutionPlan(config, GenericTreeAdapter())
        ExecutionPlan(config, BinaryTreeAdapter())

    def test_summary(self):
        plan = ExecutionPlan(TraversalConfig.shallow_scan(2), BinaryTreeAdapter())
        summary = plan.get_summary()
        self.assertEqual(summary['strategy'], 'bfs')
        self.assertEqual(summary['max_depth'], 2)
        self.assertEqual(summary['traverser'], 'BreadthFirstTraverser')
        self.assertEqual(summary['collector'], 'ValueCollector')

    def test_errors_propagate_by_default(self):
        def explode(node):
            raise RuntimeError("bad filter")

        config = TraversalConfig()
        config.filter.include_filter = explode
        plan = ExecutionPlan(config, GenericTreeAdapter())
        with self.assertRaises(RuntimeError):
            list(plan.execute(make_generic().root))
        self.assertEqual(len(plan.errors_encountered), 1)

    def test_errors_skipped_with_handler(self):
        seen = []

        def explode_on_two(node):
            if node.value == 2:
                raise RuntimeError("two")
            return True

        with self.assertLogs("treestructs.planning", level=logging.WARNING):
            values = [n.value for n in traverse_tree(
                make_generic(),
                include_filter=explode_on_two,
                on_error=lambda node, error: seen.append((node.value, str(error))),
            )]

        self.assertEqual(values, [1, 4, 5, 3, 6])
        self.assertEqual(seen, [(2, "two")])

    def test_exclude_filter_errors_reported_once(self):
        for strategy in ("dfs_pre", "dfs_post"):
            seen = []

            def explode_on_two(node):
                if node.value == 2:
                    raise RuntimeError("two")
                return False

            with self.assertLogs("treestructs.planning", level=logging.WARNING):
                values = [n.value for n in traverse_tree(
                    make_generic(),
                    strategy=strategy,
                    exclude_filter=explode_on_two,
                    on_error=lambda node, error: seen.append(node.value),
                )]

            # The failed node is dropped but its subtree is still walked
            self.assertEqual(sorted(values), [1, 3, 4, 5, 6], strategy)
            self.assertEqual(seen, [2], strategy)

    def test_summary_reports_pruning(self):
        config = TraversalConfig(filter=FilterConfig(prune_on_exclude=False))
        plan = ExecutionPlan(config, GenericTreeAdapter())
        self.assertFalse(plan.get_summary()['prune_on_exclude'])


def test_config_validate_collects_every_problem():
    config = TraversalConfig(
        depth=DepthConfig(min_depth=-1, max_depth=-2),
        max_nodes=-5,
        data_requirements=DataRequirement.CUSTOM,
    )
    errors = config.validate()
    assert "min_depth cannot be negative" in errors
    assert "max_depth cannot be negative" in errors
    assert "max_nodes must be positive" in errors
    assert "custom_collector required when data_requirements is CUSTOM" in errors


def test_bad_config_fails_even_for_empty_tree():
    with pytest.raises(InvalidConfigError):
        list(traverse_tree(GenericTree(), max_depth=-1))


if __name__ == '__main__':
    unittest.main()
