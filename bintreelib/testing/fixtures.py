"""Test fixtures for BinTreeLib consumers.

These helpers build small trees of TreeNode objects for test suites, so
tests can describe a tree in one line instead of wiring nodes by hand.
"""

from collections import deque
from typing import Any, Deque, List, Optional, Sequence

from ..core.node import TreeNode


def build_tree(spec: Any) -> Optional[TreeNode]:
    """Build a tree from a nested-tuple description.

    ``None`` is an empty tree, ``(value, left, right)`` is a node with the
    given subtrees, and any other object is a leaf holding that value.

    Example:
        build_tree((1, (2, 4, 5), (3, None, 6)))

        builds
              1
             / \\
            2   3
           / \\   \\
          4   5   6
    """
    if spec is None:
        return None
    if isinstance(spec, tuple):
        if len(spec) != 3:
            raise ValueError(
                f"Node tuples must be (value, left, right), got {len(spec)} items: {spec!r}"
            )
        value, left, right = spec
        return TreeNode(value, build_tree(left), build_tree(right))
    return TreeNode(spec)


def build_tree_from_level_order(values: Sequence[Any]) -> Optional[TreeNode]:
    """Build a tree from values listed row by row.

    ``None`` entries mark absent children. Children are only listed for
    present nodes, so ``[1, None, 2, 3]`` is 1 with right child 2, whose
    left child is 3.

    Args:
        values: Level-order values with None gaps

    Returns:
        Root TreeNode, or None if values is empty or starts with None
    """
    if not values or values[0] is None:
        return None

    root = TreeNode(values[0])
    frontier: Deque[TreeNode] = deque([root])
    index = 1

    while frontier and index < len(values):
        parent = frontier.popleft()

        if values[index] is not None:
            parent.left = TreeNode(values[index])
            frontier.append(parent.left)
        index += 1

        if index < len(values) and values[index] is not None:
            parent.right = TreeNode(values[index])
            frontier.append(parent.right)
        index += 1

    return root


def build_chain(values: Sequence[Any], side: str = "left") -> Optional[TreeNode]:
    """Build a degenerate tree where every node has one child on ``side``.

    Useful for checking that traversals survive trees far deeper than
    the interpreter's recursion limit.
    """
    if side not in ("left", "right"):
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")

    root: Optional[TreeNode] = None
    for value in reversed(values):
        node = TreeNode(value)
        setattr(node, side, root)
        root = node
    return root


def sample_tree() -> TreeNode:
    """Return the six-node tree 1(2(4, 5), 3(_, 6)) used throughout the docs."""
    return build_tree((1, (2, 4, 5), (3, None, 6)))


def all_nodes(root: Optional[TreeNode]) -> List[TreeNode]:
    """Return every node of a TreeNode tree, level by level."""
    nodes: List[TreeNode] = []
    frontier: Deque[TreeNode] = deque([root] if root is not None else [])
    while frontier:
        node = frontier.popleft()
        nodes.append(node)
        for child in (node.left, node.right):
            if child is not None:
                frontier.append(child)
    return nodes
