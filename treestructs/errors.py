"""Exceptions raised by treestructs.

Normal misses are not errors here: ``contains`` returns False, and a
duplicate or orphaned insertion is simply a no-op. The classes below cover
caller contract violations and configuration problems only.
"""


class TreeError(Exception):
    """Base class for all errors raised by treestructs."""
    pass


class EmptyTreeError(TreeError):
    """Raised when an operation needs a root but the tree is empty."""
    pass


class InvalidConfigError(TreeError, ValueError):
    """Raised when a configuration fails validation."""
    pass


class CapabilityMismatchError(TreeError):
    """Raised when configuration requirements can't be met by adapter."""
    pass
