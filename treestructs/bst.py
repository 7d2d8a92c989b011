"""Unbalanced binary search tree.

Every value in a node's left subtree is strictly smaller than the node's
value and every value in its right subtree strictly larger, so values are
unique. Nothing rebalances the tree: inserting values in sorted order
produces a chain whose height equals its size, and ``add``/``contains``
then cost O(n).
"""

import logging
from typing import Any, Iterable, Iterator, Optional

from .base import BaseTree
from .config import TreeConfig, TraversalStrategy
from .core.adapter import BinaryTreeAdapter
from .core.node import BinaryNode
from .errors import EmptyTreeError

logger = logging.getLogger(__name__)


class BinarySearchTree(BaseTree):
    """Set of unique, totally ordered values kept in a binary search tree.

    Values must support ``<``, ``>`` and ``==`` consistently. Mixing types
    that do not order against each other is undefined behavior. A visitor
    passed to ``traverse`` must leave values alone; ``is_valid`` detects
    one that didn't.

    Example:
        >>> tree = BinarySearchTree([5, 3, 8, 1, 4, 7, 9])
        >>> tree.contains(7), tree.contains(6)
        (True, False)
        >>> list(tree)
        [1, 3, 4, 5, 7, 8, 9]
    """

    adapter = BinaryTreeAdapter()

    def __init__(self,
                 values: Optional[Iterable[Any]] = None,
                 *,
                 config: Optional[TreeConfig] = None):
        super().__init__(config=config)
        self._root: Optional[BinaryNode] = None
        if values is not None:
            self.update(values)

    def contains(self, value: Any) -> bool:
        """Check whether ``value`` is stored in the tree.

        A miss is a normal False result, never an error.
        """
        current = self._root
        while current is not None:
            if value > current.value:
                current = current._right
            elif value < current.value:
                current = current._left
            else:
                return True
        return False

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def add(self, value: Any) -> bool:
        """Insert ``value``, preserving the binary search tree property.

        Descends from the root and attaches a new leaf at the first empty
        edge in the direction ``value`` sorts. A value already present
        stops the descent and leaves the tree untouched.

        Returns:
            True if a node was created, False for a duplicate
        """
        if self._root is None:
            self._root = BinaryNode(value)
            self._size = 1
            logger.debug("Created root %r", value)
            return True

        current = self._root
        while True:
            if value > current.value:
                if current._right is None:
                    current._right = BinaryNode(value)
                    break
                current = current._right
            elif value < current.value:
                if current._left is None:
                    current._left = BinaryNode(value)
                    break
                current = current._left
            else:
                logger.debug("Ignored duplicate %r", value)
                return False

        self._size += 1
        logger.debug("Inserted %r under %r", value, current.value)
        return True

    def update(self, values: Iterable[Any]) -> int:
        """Add every value from an iterable.

        Returns:
            Number of values actually inserted (duplicates excluded)
        """
        inserted = 0
        for value in values:
            if self.add(value):
                inserted += 1
        return inserted

    def in_order(self) -> Iterator[Any]:
        """Iterate over stored values in ascending order."""
        for node in self.nodes(TraversalStrategy.IN_ORDER):
            yield node.value

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def min(self) -> Any:
        """Return the smallest value.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("min() of an empty BinarySearchTree")
        current = self._root
        while current.left is not None:
            current = current.left
        return current.value

    def max(self) -> Any:
        """Return the largest value.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("max() of an empty BinarySearchTree")
        current = self._root
        while current.right is not None:
            current = current.right
        return current.value

    def is_valid(self) -> bool:
        """Re-check the binary search tree property.

        The property holds exactly when the in-order values are strictly
        ascending. Only a visitor that rewrote values can break it.
        """
        previous = None
        first = True
        for value in self.in_order():
            if not first and not previous < value:
                return False
            previous = value
            first = False
        return True
