"""Node types for treestructs.

Nodes are deliberately plain data containers. Navigation logic lives in the
TreeAdapter, and all topology changes go through the owning tree's ``add``;
children are only ever exposed read-only.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple


class TreeNode(ABC):
    """Abstract base class for nodes of both tree kinds.

    A node holds a ``value`` that callers may read and, inside a visitor,
    replace. Equality is identity: a generic tree may hold several nodes
    with equal values and they are still different nodes.
    """

    def __init__(self, value: Any):
        self.value = value

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Returns:
            bool: True if this node has no children, False otherwise
        """
        pass

    @abstractmethod
    def child_count(self) -> int:
        """Return the number of immediate children."""
        pass

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight metadata about this node.

        Returns:
            Dict with ``value``, ``type`` and ``children`` keys
        """
        return {
            'value': self.value,
            'type': self.__class__.__name__,
            'children': self.child_count(),
        }

    def __str__(self) -> str:
        """String representation defaults to the value."""
        return str(self.value)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self.value!r})"


class GenericNode(TreeNode):
    """Node of a ``GenericTree`` with an ordered list of children."""

    def __init__(self, value: Any):
        super().__init__(value)
        self._children: List['GenericNode'] = []

    @property
    def children(self) -> Tuple['GenericNode', ...]:
        """Children in insertion order (read-only snapshot)."""
        return tuple(self._children)

    def is_leaf(self) -> bool:
        return not self._children

    def child_count(self) -> int:
        return len(self._children)

    def _append(self, value: Any) -> 'GenericNode':
        child = GenericNode(value)
        self._children.append(child)
        return child


class BinaryNode(TreeNode):
    """Node of a ``BinarySearchTree`` with optional left and right children."""

    def __init__(self, value: Any):
        super().__init__(value)
        self._left: Optional['BinaryNode'] = None
        self._right: Optional['BinaryNode'] = None

    @property
    def left(self) -> Optional['BinaryNode']:
        """Root of the subtree holding smaller values, if any."""
        return self._left

    @property
    def right(self) -> Optional['BinaryNode']:
        """Root of the subtree holding larger values, if any."""
        return self._right

    def is_leaf(self) -> bool:
        return self._left is None and self._right is None

    def child_count(self) -> int:
        return (self._left is not None) + (self._right is not None)
