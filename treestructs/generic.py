"""Rooted, unordered, arbitrary-arity tree.

New leaves are attached by naming the value of an existing node. Insertion
runs in two phases: a read-only search for the matching parents, then the
appends. Nothing is mutated while a traversal is in flight.
"""

import logging
from typing import Any, Iterator, List, Optional

from .base import BaseTree
from .config import TreeConfig, ParentMatch
from .core.adapter import GenericTreeAdapter
from .core.node import GenericNode

logger = logging.getLogger(__name__)


class GenericTree(BaseTree):
    """Multi-child tree keyed by parent value.

    Example:
        >>> tree = GenericTree()
        >>> tree.add(1)
        1
        >>> tree.add(2, 1)
        1
        >>> tree.add(3, 1)
        1
        >>> list(tree)
        [1, 2, 3]
    """

    adapter = GenericTreeAdapter()

    def __init__(self, *, config: Optional[TreeConfig] = None):
        super().__init__(config=config)
        self._root: Optional[GenericNode] = None

    def find_parents(self, parent_value: Any) -> List[GenericNode]:
        """Return the nodes whose value equals ``parent_value``, in pre-order.

        Under ``ParentMatch.FIRST`` the search stops at the first match.
        """
        matches: List[GenericNode] = []
        for node in self.nodes():
            if node.value == parent_value:
                matches.append(node)
                if self.config.parent_match == ParentMatch.FIRST:
                    break
        return matches

    def add(self, value: Any, parent_value: Any = None) -> int:
        """Insert ``value`` as a new leaf under the node(s) holding ``parent_value``.

        If the tree is empty, ``value`` becomes the root and ``parent_value``
        is ignored. With the default ``ParentMatch.ALL`` a leaf is appended
        under every matching node; ``ParentMatch.FIRST`` limits that to the
        first match in pre-order. When nothing matches, the insertion is
        dropped.

        Args:
            value: Value for the new node(s)
            parent_value: Value of the node(s) to append under

        Returns:
            Number of nodes created
        """
        if self._root is None:
            self._root = GenericNode(value)
            self._size = 1
            logger.debug("Created root %r", value)
            return 1

        parents = self.find_parents(parent_value)
        if not parents:
            logger.warning(
                "Dropped insertion of %r: no node holds parent value %r",
                value, parent_value
            )
            return 0

        for parent in parents:
            parent._append(value)
        self._size += len(parents)
        logger.debug("Inserted %r under %d node(s) holding %r", value, len(parents), parent_value)
        return len(parents)

    def values(self) -> Iterator[Any]:
        """Iterate over stored values in pre-order."""
        for node in self.nodes():
            yield node.value

    def __iter__(self) -> Iterator[Any]:
        return self.values()

    def __contains__(self, value: Any) -> bool:
        return any(v == value for v in self.values())
