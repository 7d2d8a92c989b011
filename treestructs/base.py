"""Behavior shared by GenericTree and BinarySearchTree.

Both trees own at most one root node, are configured by a ``TreeConfig``
and walk themselves through a traverser and their own adapter. The
insertion logic, which is what actually differs, lives in the subclasses.
"""

from typing import Any, Callable, Iterator, Optional, Union

from .config import TreeConfig, EmptyTreePolicy, TraversalStrategy
from .core.adapter import TreeAdapter
from .core.node import TreeNode
from .core.traverser import TreeTraverser, create_traverser
from .errors import EmptyTreeError, InvalidConfigError


class BaseTree:
    """Rooted tree that is empty at construction and only ever grows."""

    adapter: TreeAdapter

    def __init__(self, *, config: Optional[TreeConfig] = None):
        self.config = config if config is not None else TreeConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise InvalidConfigError(
                f"Invalid tree configuration: {'; '.join(config_errors)}"
            )

        self._root: Optional[TreeNode] = None
        self._size = 0

    @property
    def root(self) -> Optional[TreeNode]:
        """The top-level node, or None while the tree is empty."""
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def _can_traverse(self) -> bool:
        """Apply the empty-tree policy.

        Returns:
            True if there is a root to walk

        Raises:
            EmptyTreeError: If the tree is empty under EmptyTreePolicy.RAISE
        """
        if self._root is not None:
            return True
        if self.config.empty_traversal == EmptyTreePolicy.RAISE:
            raise EmptyTreeError(f"Cannot traverse an empty {self.__class__.__name__}")
        return False

    def nodes(self,
              strategy: Union[TraversalStrategy, str, TreeTraverser] = TraversalStrategy.DEPTH_FIRST_PRE
              ) -> Iterator[TreeNode]:
        """Iterate over every node in the given order.

        ``strategy`` is a built-in strategy (member or name) or a
        ``TreeTraverser`` instance; ``TraversalStrategy.CUSTOM`` alone is
        rejected because it names no traverser. An empty tree yields
        nothing regardless of the empty-tree policy, which only governs
        ``traverse``.

        Raises:
            ValueError: For an unknown name or a bare ``CUSTOM``
        """
        if isinstance(strategy, TreeTraverser):
            traverser = strategy
        else:
            traverser = create_traverser(strategy, self.adapter)
        if self._root is None:
            return
        for node, _ in traverser.traverse(self._root):
            yield node

    def traverse(self,
                 visit: Callable[[TreeNode], Any],
                 strategy: Union[TraversalStrategy, str, TreeTraverser] = TraversalStrategy.DEPTH_FIRST_PRE
                 ) -> None:
        """Call ``visit`` once for every node.

        The default strategy is depth-first pre-order: a node is visited
        before its descendants, children in order. ``visit`` may change a
        node's ``value`` but must not change the tree's shape.

        Raises:
            EmptyTreeError: If the tree is empty and the config says to raise
        """
        if not self._can_traverse():
            return
        for node in self.nodes(strategy):
            visit(node)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        traverser = create_traverser(TraversalStrategy.BREADTH_FIRST, self.adapter)
        deepest = 0
        for _, depth in traverser.traverse(self._root):
            deepest = max(deepest, depth)
        return deepest + 1

    def __repr__(self) -> str:
        root = self._root.value if self._root is not None else None
        return f"{self.__class__.__name__}(root={root!r}, size={self._size})"
