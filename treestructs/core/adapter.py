"""TreeAdapter abstraction for treestructs.

The TreeAdapter provides the navigation logic for a specific node type,
decoupling the node representation from the traversal mechanism. Traversers
never touch node internals directly; they only ask the adapter for children.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional
from .node import TreeNode, GenericNode, BinaryNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating a specific kind of tree.

    This separation allows:
    - The same traverser to walk generic and binary trees
    - Strategies that need extra structure (in-order) to check for it
    """

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child TreeNode instances in order
        """
        pass

    # Capability flags - adapters declare what they support

    def supports_in_order(self) -> bool:
        """Check if adapter can distinguish left and right children.

        In-order traversal is only defined for binary trees.

        Returns:
            True if ``get_left`` and ``get_right`` are implemented
        """
        return False


class GenericTreeAdapter(TreeAdapter):
    """Adapter for ``GenericNode`` trees."""

    def get_children(self, node: GenericNode) -> Iterator[GenericNode]:
        return iter(node.children)


class BinaryTreeAdapter(TreeAdapter):
    """Adapter for ``BinaryNode`` trees.

    Children are reported left first, skipping absent sides.
    """

    def get_children(self, node: BinaryNode) -> Iterator[BinaryNode]:
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def get_left(self, node: BinaryNode) -> Optional[BinaryNode]:
        return node.left

    def get_right(self, node: BinaryNode) -> Optional[BinaryNode]:
        return node.right

    def supports_in_order(self) -> bool:
        return True
