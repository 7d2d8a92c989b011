#!/usr/bin/env python3
"""
Basic treestructs usage.

This example demonstrates:
- Building a generic tree by parent value
- Ordered insertion and lookup in a binary search tree
- The unbalanced worst case for sorted input
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treestructs import BinarySearchTree, GenericTree, get_tree_stats


def generic_demo() -> None:
    tree = GenericTree()
    tree.add("src")
    tree.add("core", "src")
    tree.add("api.py", "src")
    tree.add("node.py", "core")
    tree.add("lost.py", "missing")  # logged and dropped

    def show(node):
        print(f"  {node.value}")

    print("Generic tree (pre-order):")
    tree.traverse(show)


def bst_demo() -> None:
    tree = BinarySearchTree([5, 3, 8, 1, 4, 7, 9])
    print(f"\nBST in order: {list(tree)}")
    print(f"contains(7) = {tree.contains(7)}, contains(6) = {tree.contains(6)}")
    print(f"height = {tree.height()}")

    chain = BinarySearchTree(range(20))
    stats = get_tree_stats(chain)
    print(f"\nSorted input, 20 values: height = {chain.height()}, "
          f"leaves = {stats['leaf_nodes']}")


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    generic_demo()
    bst_demo()


if __name__ == "__main__":
    main()
