"""treestructs - In-memory generic and binary search trees.

Two independent containers built on one traversal toolkit:

    from treestructs import GenericTree, BinarySearchTree

    tree = GenericTree()
    tree.add(1)
    tree.add(2, 1)

    bst = BinarySearchTree([5, 3, 8])
    bst.contains(3)

The toolkit (adapters, traversers, collectors, ExecutionPlan) and the
functional API in ``treestructs.api`` work on either tree.
"""

import logging

__version__ = "0.1.0"

from .errors import (
    TreeError,
    EmptyTreeError,
    InvalidConfigError,
    CapabilityMismatchError,
)
from .config import (
    TreeConfig,
    ParentMatch,
    EmptyTreePolicy,
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .core import (
    TreeNode,
    GenericNode,
    BinaryNode,
    TreeAdapter,
    GenericTreeAdapter,
    BinaryTreeAdapter,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    InOrderTraverser,
    create_traverser,
)
from .generic import GenericTree
from .bst import BinarySearchTree
from .planning import ExecutionPlan
from .api import (
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Trees
    "GenericTree",
    "BinarySearchTree",
    # Errors
    "TreeError",
    "EmptyTreeError",
    "InvalidConfigError",
    "CapabilityMismatchError",
    # Config
    "TreeConfig",
    "ParentMatch",
    "EmptyTreePolicy",
    "TraversalConfig",
    "TraversalStrategy",
    "DataRequirement",
    "DepthConfig",
    "FilterConfig",
    # Core
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
    "ExecutionPlan",
    # API
    "traverse_tree",
    "collect_tree_data",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
]
