"""Per-node payloads for an execution plan.

A collector turns each visited ``(node, depth)`` pair into the data the
caller asked for with a ``DataRequirement``. Nodes here hold a single
``value``, so most collectors are one line.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Type

from ..config import DataRequirement
from .adapter import TreeAdapter
from .node import TreeNode


class DataCollector(ABC):
    """Maps a visited node to the payload yielded next to it."""

    requirement: Optional[DataRequirement] = None

    def __init__(self, adapter: TreeAdapter):
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Return the payload for ``node`` reached at ``depth``."""


class ValueCollector(DataCollector):
    requirement = DataRequirement.VALUE

    def collect(self, node: TreeNode, depth: int) -> Any:
        return node.value


class MetadataCollector(DataCollector):
    requirement = DataRequirement.METADATA

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        return node.metadata()


class FullNodeCollector(DataCollector):
    requirement = DataRequirement.FULL_NODE

    def collect(self, node: TreeNode, depth: int) -> TreeNode:
        return node


class DepthCollector(DataCollector):
    requirement = DataRequirement.DEPTH

    def collect(self, node: TreeNode, depth: int) -> int:
        return depth


class ChildCountCollector(DataCollector):
    """Structure report: ``value``, ``depth``, ``child_count`` and ``is_leaf``.

    Children are counted through the adapter, so a binary node with one
    missing side counts one child.
    """

    requirement = DataRequirement.CHILDREN_COUNT

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        count = sum(1 for _ in self.adapter.get_children(node))
        return {
            'value': node.value,
            'depth': depth,
            'child_count': count,
            'is_leaf': count == 0,
        }


class CustomCollector(DataCollector):
    """Wraps a plain ``func(node, depth)`` so callers need no subclass."""

    requirement = DataRequirement.CUSTOM

    def __init__(self, adapter: TreeAdapter, func: Callable[[TreeNode, int], Any]):
        super().__init__(adapter)
        self.func = func

    def collect(self, node: TreeNode, depth: int) -> Any:
        return self.func(node, depth)


_COLLECTORS: Dict[DataRequirement, Type[DataCollector]] = {
    cls.requirement: cls
    for cls in (ValueCollector, MetadataCollector, FullNodeCollector,
                DepthCollector, ChildCountCollector)
}


def create_collector(requirement: DataRequirement, adapter: TreeAdapter) -> DataCollector:
    """Build the collector for a built-in requirement.

    Raises:
        ValueError: For ``DataRequirement.CUSTOM``, which needs a collector
            instance from the caller
    """
    if requirement not in _COLLECTORS:
        raise ValueError(f"No built-in collector for {requirement}")
    return _COLLECTORS[requirement](adapter)
