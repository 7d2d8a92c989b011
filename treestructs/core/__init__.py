"""Core abstractions for treestructs.

This module contains the node types, adapters, traversal strategies and
data collectors the two trees are built on.
"""

from .node import TreeNode, GenericNode, BinaryNode
from .adapter import TreeAdapter, GenericTreeAdapter, BinaryTreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    InOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    MetadataCollector,
    FullNodeCollector,
    DepthCollector,
    ChildCountCollector,
    CustomCollector,
    create_collector,
)

__all__ = [
    "TreeNode",
    "GenericNode",
    "BinaryNode",
    "TreeAdapter",
    "GenericTreeAdapter",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "InOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "MetadataCollector",
    "FullNodeCollector",
    "DepthCollector",
    "ChildCountCollector",
    "CustomCollector",
    "create_collector",
]
