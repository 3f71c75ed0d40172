"""TreeNode container for BinTreeLib.

The TreeNode is intentionally kept simple - it's only a data container.
Every operation reads nodes through a BinaryTreeAdapter, so callers with
their own node classes never need this one.
"""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class TreeNode(Generic[T]):
    """A binary tree node holding a value and two optional children.

    Equality is identity-based: two nodes holding the same value are still
    different nodes.

    Example:
        root = TreeNode(1, TreeNode(2), TreeNode(3))
    """

    def __init__(self,
                 value: T,
                 left: Optional["TreeNode[T]"] = None,
                 right: Optional["TreeNode[T]"] = None):
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}(value={self.value!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )
