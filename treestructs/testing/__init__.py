"""Test helpers for treestructs consumers."""

from .fixtures import tree_shape, build_generic_tree

__all__ = ['tree_shape', 'build_generic_tree']
