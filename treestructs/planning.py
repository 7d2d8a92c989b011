"""Execution plans: a traversal that has been checked and is ready to run.

``ExecutionPlan`` pairs a ``TraversalConfig`` with the adapter of the tree
it will walk. Everything that can be known before the first node is
checked at construction; ``execute`` then streams ``(node, data)`` pairs.
"""

import logging
from typing import Any, Dict, Iterator, List, Set, Tuple

from .config import TraversalConfig, TraversalStrategy, DataRequirement
from .core.adapter import TreeAdapter
from .core.collector import DataCollector, create_collector
from .core.node import TreeNode
from .core.traverser import TreeTraverser, create_traverser
from .errors import CapabilityMismatchError, InvalidConfigError

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """A traversal configuration bound to a tree adapter.

    Raises:
        InvalidConfigError: If ``config.validate()`` reports problems
        CapabilityMismatchError: If the strategy needs something the
            adapter lacks, such as in-order on a generic tree
    """

    def __init__(self, config: TraversalConfig, adapter: TreeAdapter):
        problems = config.validate()
        if problems:
            raise InvalidConfigError(f"Invalid configuration: {'; '.join(problems)}")

        if config.strategy is TraversalStrategy.IN_ORDER and not adapter.supports_in_order():
            raise CapabilityMismatchError(
                f"{type(adapter).__name__} does not support in-order traversal"
            )

        self.config = config
        self.adapter = adapter

        if config.strategy is TraversalStrategy.CUSTOM:
            self.traverser: TreeTraverser = config.custom_traverser
        else:
            self.traverser = create_traverser(config.strategy, adapter)

        if config.data_requirements is DataRequirement.CUSTOM:
            self.collector: DataCollector = config.custom_collector
        else:
            self.collector = create_collector(config.data_requirements, adapter)

        self.nodes_processed = 0
        self.errors_encountered: List[Tuple[Any, str]] = []
        self._failed: Set[int] = set()

        logger.debug("Execution plan ready: %s", self.get_summary())

    def execute(self, root: TreeNode) -> Iterator[Tuple[TreeNode, Any]]:
        """Walk from ``root``, yielding ``(node, data)`` for each node that passes.

        Filters, collectors and ``on_error`` are caller code. Anything they
        raise is handed to ``on_error`` and then skipped or re-raised
        according to ``skip_errors``. A node that failed is not yielded,
        but the walk still descends below it.
        """
        self.nodes_processed = 0
        self.errors_encountered = []
        self._failed = set()
        window = self.config.depth

        for node, depth in self.traverser.traverse(root,
                                                   max_depth=window.max_depth,
                                                   min_depth=window.min_depth,
                                                   explore=self._explore):
            if self.config.max_nodes is not None and self.nodes_processed >= self.config.max_nodes:
                return
            if id(node) in self._failed:
                continue

            try:
                if not self.config.filter.should_include(node):
                    continue
                data = self.collector.collect(node, depth)
            except Exception as e:
                if self._absorb(node, e):
                    continue
                raise

            self.nodes_processed += 1
            yield node, data

    def _explore(self, node: TreeNode, depth: int) -> bool:
        if id(node) in self._failed:
            return True
        try:
            return self.config.filter.should_explore_children(node)
        except Exception as e:
            if self._absorb(node, e):
                return True
            raise

    def _absorb(self, node: TreeNode, error: Exception) -> bool:
        """Record ``error`` and report whether the walk carries on."""
        self._failed.add(id(node))
        self.errors_encountered.append((node.value, str(error)))

        if self.config.on_error is not None:
            self.config.on_error(node, error)

        if not self.config.skip_errors:
            return False
        logger.warning("Skipping node %r after error: %s", node.value, error)
        return True

    def get_summary(self) -> Dict[str, Any]:
        """Describe the plan as a flat dict (used for debug logging)."""
        config = self.config
        return {
            'strategy': config.strategy.value,
            'data_requirements': config.data_requirements.value,
            'min_depth': config.depth.min_depth,
            'max_depth': config.depth.max_depth,
            'prune_on_exclude': config.filter.prune_on_exclude,
            'max_nodes': config.max_nodes,
            'adapter': type(self.adapter).__name__,
            'traverser': type(self.traverser).__name__,
            'collector': type(self.collector).__name__,
        }
