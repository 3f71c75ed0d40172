"""BinaryTreeAdapter abstraction for BinTreeLib.

The adapter provides the navigation logic for binary trees, decoupling
the node representation from the traversal algorithms. Any object that
stores a value and two child references can be traversed once an adapter
knows which attributes hold them.
"""

from typing import Any, Iterator, Optional


class InvalidNodeError(TypeError):
    """Raised when a node does not expose an attribute the adapter reads."""
    pass


class BinaryTreeAdapter:
    """Adapter for reading values and children from binary tree nodes.

    By default nodes are expected to expose ``value``, ``left`` and
    ``right`` attributes. Other node layouts are supported by naming
    their attributes:

        adapter = BinaryTreeAdapter(value_attr="val")

    An absent child is represented by ``None``.
    """

    def __init__(self,
                 value_attr: str = "value",
                 left_attr: str = "left",
                 right_attr: str = "right"):
        """Initialize adapter with the node attribute names.

        Args:
            value_attr: Attribute holding the node's value
            left_attr: Attribute holding the left child (or None)
            right_attr: Attribute holding the right child (or None)
        """
        self.value_attr = value_attr
        self.left_attr = left_attr
        self.right_attr = right_attr

    def _read(self, node: Any, attr: str) -> Any:
        try:
            return getattr(node, attr)
        except AttributeError:
            raise InvalidNodeError(
                f"{type(node).__name__} object has no attribute {attr!r}; "
                f"expected a node exposing "
                f"{self.value_attr!r}, {self.left_attr!r} and {self.right_attr!r}"
            ) from None

    def get_value(self, node: Any) -> Any:
        """Return the value stored in a node."""
        return self._read(node, self.value_attr)

    def get_left(self, node: Any) -> Optional[Any]:
        """Return the left child of a node, or None."""
        return self._read(node, self.left_attr)

    def get_right(self, node: Any) -> Optional[Any]:
        """Return the right child of a node, or None."""
        return self._read(node, self.right_attr)

    def get_children(self, node: Any) -> Iterator[Any]:
        """Get an iterator of the present children, left before right.

        Args:
            node: The parent node

        Returns:
            Iterator yielding zero, one or two child nodes
        """
        left = self.get_left(node)
        if left is not None:
            yield left
        right = self.get_right(node)
        if right is not None:
            yield right

    def is_leaf(self, node: Any) -> bool:
        """Check if a node has neither a left nor a right child."""
        return self.get_left(node) is None and self.get_right(node) is None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(value_attr={self.value_attr!r}, "
            f"left_attr={self.left_attr!r}, right_attr={self.right_attr!r})"
        )


DEFAULT_ADAPTER = BinaryTreeAdapter()


def resolve_adapter(adapter: Optional[BinaryTreeAdapter]) -> BinaryTreeAdapter:
    """Return the given adapter, or the shared default one if None."""
    return DEFAULT_ADAPTER if adapter is None else adapter
