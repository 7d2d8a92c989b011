"""Walk orders for treestructs.

A traverser turns a start node into a stream of ``(node, depth)`` pairs,
depth counted from the start node. Subclasses only describe their walk
order in ``_walk``. The shared ``traverse`` applies the depth window from
``DepthConfig`` and an optional ``explore`` callback that can cut off a
subtree. Pending nodes always sit in a list or deque, so a chain ten
thousand nodes deep is walked without recursion.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Type, Union

from ..config import DepthConfig, TraversalStrategy
from ..errors import CapabilityMismatchError
from .adapter import TreeAdapter
from .node import TreeNode

Visit = Tuple[TreeNode, int]
Descend = Callable[[TreeNode, int], bool]


class TreeTraverser(ABC):
    """One walk order over any tree the adapter can navigate.

    The consumer may rewrite ``node.value`` between steps but must not
    change the tree's shape while a walk is in progress.
    """

    strategy: TraversalStrategy

    def __init__(self, adapter: TreeAdapter):
        self.adapter = adapter

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 explore: Optional[Descend] = None) -> Iterator[Visit]:
        """Yield ``(node, depth)`` for the nodes between ``min_depth`` and ``max_depth``.

        Args:
            root: Node the walk starts from (depth 0)
            max_depth: Deepest depth walked (None = down to the leaves)
            min_depth: Shallower nodes are walked but not yielded
            explore: ``explore(node, depth)`` returning False keeps the walk
                out of that node's children; the node itself is unaffected
        """
        window = DepthConfig(min_depth=min_depth, max_depth=max_depth)

        def descend(node: TreeNode, depth: int) -> bool:
            if node.is_leaf() or not window.should_explore(depth):
                return False
            return explore is None or explore(node, depth)

        for node, depth in self._walk(root, descend):
            if window.should_yield(depth):
                yield node, depth

    @abstractmethod
    def _walk(self, root: TreeNode, descend: Descend) -> Iterator[Visit]:
        """Yield every reached node, expanding only those ``descend`` allows."""

    def _expand(self, node: TreeNode, depth: int, descend: Descend) -> List[TreeNode]:
        if not descend(node, depth):
            return []
        return list(self.adapter.get_children(node))


class BreadthFirstTraverser(TreeTraverser):
    """Shallow nodes first, siblings in adapter order."""

    strategy = TraversalStrategy.BREADTH_FIRST

    def _walk(self, root: TreeNode, descend: Descend) -> Iterator[Visit]:
        pending = deque([(root, 0)])
        while pending:
            node, depth = pending.popleft()
            yield node, depth
            pending.extend((child, depth + 1) for child in self._expand(node, depth, descend))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Each node before its descendants, children left to right.

    This is the order ``GenericTree.traverse`` promises. A node's children
    are fetched only once the consumer is done with the node.
    """

    strategy = TraversalStrategy.DEPTH_FIRST_PRE

    def _walk(self, root: TreeNode, descend: Descend) -> Iterator[Visit]:
        stack = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            children = self._expand(node, depth, descend)
            stack.extend((child, depth + 1) for child in reversed(children))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Each node after all of its descendants."""

    strategy = TraversalStrategy.DEPTH_FIRST_POST

    def _walk(self, root: TreeNode, descend: Descend) -> Iterator[Visit]:
        # Third item: the node's children are already on the stack
        stack = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield node, depth
                continue
            stack.append((node, depth, True))
            children = self._expand(node, depth, descend)
            stack.extend((child, depth + 1, False) for child in reversed(children))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first order, produced one whole level at a time."""

    strategy = TraversalStrategy.LEVEL_ORDER

    def _walk(self, root: TreeNode, descend: Descend) -> Iterator[Visit]:
        level = [root]
        depth = 0
        while level:
            below: List[TreeNode] = []
            for node in level:
                yield node, depth
                below.extend(self._expand(node, depth, descend))
            level = below
            depth += 1


class InOrderTraverser(TreeTraverser):
    """Left subtree, node, right subtree.

    On a binary search tree this is ascending value order. Only adapters
    that can tell a left child from a right one qualify.
    """

    strategy = TraversalStrategy.IN_ORDER

    def __init__(self, adapter: TreeAdapter):
        if not adapter.supports_in_order():
            raise CapabilityMismatchError(
                f"{type(adapter).__name__} has no left/right children; "
                f"in-order traversal needs a binary tree adapter"
            )
        super().__init__(adapter)

    def _walk(self, root: TreeNode, descend: Descend) -> Iterator[Visit]:
        # Entries remember whether their node may be descended into, so
        # descend() runs once per node
        stack: List[Tuple[TreeNode, int, bool]] = []
        node: Optional[TreeNode] = root
        depth = 0
        while stack or node is not None:
            while node is not None:
                expandable = descend(node, depth)
                stack.append((node, depth, expandable))
                node = self.adapter.get_left(node) if expandable else None
                depth += 1

            node, depth, expandable = stack.pop()
            yield node, depth
            node = self.adapter.get_right(node) if expandable else None
            depth += 1


_TRAVERSERS: Dict[TraversalStrategy, Type[TreeTraverser]] = {
    cls.strategy: cls
    for cls in (BreadthFirstTraverser, DepthFirstPreOrderTraverser,
                DepthFirstPostOrderTraverser, LevelOrderTraverser, InOrderTraverser)
}


def create_traverser(strategy: Union[TraversalStrategy, str],
                     adapter: TreeAdapter) -> TreeTraverser:
    """Build the built-in traverser for a strategy member or name.

    Raises:
        ValueError: For an unknown name, or for ``TraversalStrategy.CUSTOM``,
            which has no built-in traverser
        CapabilityMismatchError: For in-order on a non-binary adapter
    """
    strategy = TraversalStrategy.parse(strategy)
    if strategy is TraversalStrategy.CUSTOM:
        raise ValueError(
            "TraversalStrategy.CUSTOM has no built-in traverser; "
            "pass a TreeTraverser instance instead"
        )
    return _TRAVERSERS[strategy](adapter)
