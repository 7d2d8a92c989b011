"""Configuration system for treestructs.

Two layers of configuration live here:

- ``TreeConfig`` controls how the trees themselves behave (which parents
  receive a generic insertion, what traversing an empty tree means).
- ``TraversalConfig`` describes a single traversal run: strategy, depth
  limits, filters and what data to collect from each node.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Any, List, Union


class ParentMatch(Enum):
    """Which matching parents receive a new leaf in ``GenericTree.add``."""
    ALL = "all"        # Every node whose value equals the parent value
    FIRST = "first"    # Only the first match in pre-order


class EmptyTreePolicy(Enum):
    """What ``traverse`` does when the tree has no root."""
    IGNORE = "ignore"  # Silent no-op
    RAISE = "raise"    # Raise EmptyTreeError


class TraversalStrategy(Enum):
    """Walk order of a traversal; ``parse`` also accepts the long names."""
    BREADTH_FIRST = "bfs"           # Shallow nodes first
    DEPTH_FIRST_PRE = "dfs_pre"     # Node, then its subtrees
    DEPTH_FIRST_POST = "dfs_post"   # Subtrees, then the node
    LEVEL_ORDER = "level"           # Breadth-first, one level at a time
    IN_ORDER = "in_order"           # Left, node, right (binary trees only)
    CUSTOM = "custom"               # TraversalConfig.custom_traverser

    @classmethod
    def parse(cls, strategy: Union['TraversalStrategy', str]) -> 'TraversalStrategy':
        """Resolve a member, its value, or a long-form name such as "breadth_first".

        Raises:
            ValueError: If the name matches no strategy
        """
        if isinstance(strategy, cls):
            return strategy
        name = str(strategy).lower()
        try:
            return cls(_STRATEGY_ALIASES.get(name, name))
        except ValueError:
            raise ValueError(f"Unknown traversal strategy: {strategy}") from None


_STRATEGY_ALIASES = {
    'breadth_first': 'bfs',
    'dfs': 'dfs_pre',
    'depth_first_pre': 'dfs_pre',
    'depth_first_post': 'dfs_post',
    'level_order': 'level',
    'inorder': 'in_order',
}


class DataRequirement(Enum):
    """Payload yielded next to each node by an execution plan."""
    VALUE = "value"                     # The stored value
    METADATA = "metadata"               # Lightweight metadata dict
    FULL_NODE = "full"                  # The node object itself
    CHILDREN_COUNT = "children_count"   # Value, depth and child count
    DEPTH = "depth"                     # Depth relative to the start node
    CUSTOM = "custom"                   # TraversalConfig.custom_collector


@dataclass
class TreeConfig:
    """Behavioral configuration shared by ``GenericTree`` and ``BinarySearchTree``."""

    parent_match: ParentMatch = ParentMatch.ALL
    empty_traversal: EmptyTreePolicy = EmptyTreePolicy.IGNORE

    @classmethod
    def strict(cls) -> 'TreeConfig':
        """Create config that reports traversal of an empty tree as an error."""
        return cls(empty_traversal=EmptyTreePolicy.RAISE)

    @classmethod
    def first_match(cls) -> 'TreeConfig':
        """Create config that inserts generic leaves under the first match only."""
        return cls(parent_match=ParentMatch.FIRST)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.parent_match, ParentMatch):
            errors.append(f"parent_match must be a ParentMatch, got {self.parent_match!r}")
        if not isinstance(self.empty_traversal, EmptyTreePolicy):
            errors.append(
                f"empty_traversal must be an EmptyTreePolicy, got {self.empty_traversal!r}"
            )
        return errors


@dataclass
class FilterConfig:
    """Node predicates of a traversal.

    ``include_filter`` only decides what is yielded. A node matched by
    ``exclude_filter`` is hidden together with its whole subtree unless
    ``prune_on_exclude`` is turned off.
    """

    include_filter: Optional[Callable[[Any], bool]] = None
    exclude_filter: Optional[Callable[[Any], bool]] = None
    prune_on_exclude: bool = True

    def should_include(self, node) -> bool:
        """Check if a node should be yielded; exclusion wins over inclusion."""
        if self.exclude_filter and self.exclude_filter(node):
            return False
        if self.include_filter:
            return self.include_filter(node)
        return True

    def should_explore_children(self, node) -> bool:
        """Check if the walk may descend below ``node``."""
        if not self.prune_on_exclude or self.exclude_filter is None:
            return True
        return not self.exclude_filter(node)


@dataclass
class DepthConfig:
    """Depth window of a traversal, counted from the start node (depth 0).

    Every traverser asks this one object both questions, so the window
    means the same thing in every walk order.
    """

    min_depth: int = 0                # Shallowest depth that is yielded
    max_depth: Optional[int] = None   # Deepest depth walked; None for no limit

    def should_yield(self, depth: int) -> bool:
        return depth >= self.min_depth and (self.max_depth is None or depth <= self.max_depth)

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at ``depth`` still fall inside the window."""
        return self.max_depth is None or depth < self.max_depth


@dataclass
class TraversalConfig:
    """One traversal run, as handed to ``ExecutionPlan``."""

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    custom_traverser: Optional[Any] = None    # TreeTraverser for CUSTOM
    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    data_requirements: DataRequirement = DataRequirement.VALUE
    custom_collector: Optional[Any] = None    # DataCollector for CUSTOM
    max_nodes: Optional[int] = None           # Stop after yielding this many
    on_error: Optional[Callable[[Any, Exception], None]] = None
    skip_errors: bool = False                 # False re-raises after on_error

    @classmethod
    def shallow_scan(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Breadth-first down to ``max_depth`` (1 = the root and its children)."""
        return cls(strategy=TraversalStrategy.BREADTH_FIRST,
                   depth=DepthConfig(max_depth=max_depth))

    @classmethod
    def sorted_values(cls) -> 'TraversalConfig':
        """Values of a binary search tree in ascending order."""
        return cls(strategy=TraversalStrategy.IN_ORDER)

    def validate(self) -> List[str]:
        """Return a description of every problem; empty when usable."""
        problems = []
        if not isinstance(self.strategy, TraversalStrategy):
            problems.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        window = self.depth
        if window.min_depth < 0:
            problems.append("min_depth cannot be negative")
        if window.max_depth is not None and window.max_depth < 0:
            problems.append("max_depth cannot be negative")
        if window.max_depth is not None and window.max_depth < window.min_depth:
            problems.append("max_depth cannot be less than min_depth")
        if self.max_nodes is not None and self.max_nodes <= 0:
            problems.append("max_nodes must be positive")

        if self.strategy is TraversalStrategy.CUSTOM and self.custom_traverser is None:
            problems.append("custom_traverser required when strategy is CUSTOM")
        if self.data_requirements is DataRequirement.CUSTOM and self.custom_collector is None:
            problems.append("custom_collector required when data_requirements is CUSTOM")
        return problems
