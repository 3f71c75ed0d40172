"""High-level API for BinTreeLib.

This module provides the read-only queries over binary trees: aggregates,
structural predicates, traversal orderings and root-to-leaf paths. Each
function takes a root node (None for an empty tree) and never mutates it.

All functions accept an optional ``adapter`` for node types that do not
use the ``value``/``left``/``right`` attribute names.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .config import DepthConfig, TraversalConfig, TraversalStrategy, parse_strategy
from .core.adapter import BinaryTreeAdapter, resolve_adapter
from .core.traverser import (
    LevelOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    create_traverser,
)

logger = logging.getLogger(__name__)


# Aggregates

def sum_leaf_nodes(root: Optional[Any],
                   adapter: Optional[BinaryTreeAdapter] = None) -> int:
    """Sum the values of all leaf nodes.

    A single node is its own leaf, so its value is returned.

    Args:
        root: Root of a tree of numbers (None = empty tree)
        adapter: Adapter for the node type

    Returns:
        Sum of leaf values, or 0 for an empty tree

    Example:
        >>> sum_leaf_nodes(TreeNode(1, TreeNode(2), TreeNode(3)))
        5
    """
    adapter = resolve_adapter(adapter)
    total = 0
    for node, _ in PreOrderTraverser(adapter).traverse(root):
        if adapter.is_leaf(node):
            total += adapter.get_value(node)
    return total


def count_internal_nodes(root: Optional[Any],
                         adapter: Optional[BinaryTreeAdapter] = None) -> int:
    """Count nodes that have at least one child.

    Returns:
        Number of internal nodes, 0 for an empty or single-node tree
    """
    adapter = resolve_adapter(adapter)
    return sum(
        1 for node, _ in PreOrderTraverser(adapter).traverse(root)
        if not adapter.is_leaf(node)
    )


def count_distinct_values(root: Optional[Any],
                          adapter: Optional[BinaryTreeAdapter] = None) -> int:
    """Count the unique values stored in the tree.

    Nodes are visited breadth-first; duplicates collapse. Values must be
    hashable.

    Returns:
        Number of distinct values, or 0 for an empty tree
    """
    adapter = resolve_adapter(adapter)
    uniques = set()
    for node, _ in LevelOrderTraverser(adapter).traverse(root):
        uniques.add(adapter.get_value(node))
    return len(uniques)


# Orderings

def build_post_order_string(root: Optional[Any],
                            adapter: Optional[BinaryTreeAdapter] = None) -> str:
    """Concatenate the string form of every value in post-order.

    For each node the left subtree comes first, then the right subtree,
    then the node itself.

    Returns:
        The concatenated string, or "" for an empty tree

    Example:
        >>> build_post_order_string(sample_tree())
        '452631'
    """
    adapter = resolve_adapter(adapter)
    return "".join(
        str(adapter.get_value(node))
        for node, _ in PostOrderTraverser(adapter).traverse(root)
    )


def collect_level_order_values(root: Optional[Any],
                               adapter: Optional[BinaryTreeAdapter] = None) -> List[Any]:
    """Collect values row by row, top to bottom, left to right.

    Returns:
        List of values in level order, [] for an empty tree
    """
    adapter = resolve_adapter(adapter)
    return [
        adapter.get_value(node)
        for node, _ in LevelOrderTraverser(adapter).traverse(root)
    ]


# Structural predicates

def has_strictly_increasing_path(root: Optional[Any],
                                 adapter: Optional[BinaryTreeAdapter] = None) -> bool:
    """Check for a root-to-leaf path whose values strictly increase.

    A child is only explored when its value is strictly greater than its
    parent's; other children are pruned. The left side is searched before
    the right side, and the search stops at the first leaf reached. A lone
    root is a leaf and therefore a valid path.

    Args:
        root: Root of a tree of ordered values (None = empty tree)
        adapter: Adapter for the node type

    Returns:
        True if such a path exists, False otherwise (and for an empty tree)
    """
    if root is None:
        return False
    adapter = resolve_adapter(adapter)
    stack = [root]

    while stack:
        node = stack.pop()
        if adapter.is_leaf(node):
            return True

        value = adapter.get_value(node)
        # Right is pushed first so the whole left side is searched before it
        for child in (adapter.get_right(node), adapter.get_left(node)):
            if child is not None and adapter.get_value(child) > value:
                stack.append(child)

    return False


def have_same_shape(root_a: Optional[Any],
                    root_b: Optional[Any],
                    adapter: Optional[BinaryTreeAdapter] = None) -> bool:
    """Check if two trees have the same arrangement of nodes.

    Values are ignored; only the presence or absence of each child at
    every position is compared.

    Args:
        root_a: Root of the first tree (None = empty tree)
        root_b: Root of the second tree (None = empty tree)
        adapter: Adapter for both node types

    Returns:
        True if both are empty or have identical shapes
    """
    adapter = resolve_adapter(adapter)
    stack: List[Tuple[Optional[Any], Optional[Any]]] = [(root_a, root_b)]

    while stack:
        node_a, node_b = stack.pop()
        if node_a is None and node_b is None:
            continue
        if node_a is None or node_b is None:
            return False
        stack.append((adapter.get_right(node_a), adapter.get_right(node_b)))
        stack.append((adapter.get_left(node_a), adapter.get_left(node_b)))

    return True


# Paths

def find_all_root_to_leaf_paths(root: Optional[Any],
                                adapter: Optional[BinaryTreeAdapter] = None) -> List[List[Any]]:
    """Find the values along every path from the root to a leaf.

    Paths are listed in the order their leaves are reached by a
    left-before-right depth-first walk. A single path buffer is shared
    across the walk: a node's value is appended when the node is entered
    and popped once both its subtrees are done. Each recorded path is a
    copy of the buffer, so the returned lists are independent.

    Returns:
        List of paths (lists of values), [] for an empty tree

    Example:
        >>> find_all_root_to_leaf_paths(sample_tree())
        [[1, 2, 4], [1, 2, 5], [1, 3, 6]]
    """
    paths: List[List[Any]] = []
    if root is None:
        return paths
    adapter = resolve_adapter(adapter)

    path: List[Any] = []
    # Frames are (node, leaving); a leaving frame pops the node's value
    stack: List[Tuple[Any, bool]] = [(root, False)]

    while stack:
        node, leaving = stack.pop()
        if leaving:
            path.pop()
            continue

        path.append(adapter.get_value(node))
        stack.append((node, True))

        children = list(adapter.get_children(node))
        if not children:
            paths.append(list(path))
        else:
            for child in reversed(children):
                stack.append((child, False))

    return paths


# Generic traversal

def traverse_tree(
    root: Optional[Any],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.LEVEL_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    adapter: Optional[BinaryTreeAdapter] = None,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal (None = empty tree)
        strategy: Traversal order (pre, in, post, level)
        max_depth: Maximum depth to traverse (root = 0)
        min_depth: Minimum depth before yielding nodes
        adapter: Adapter for the node type

    Yields:
        Nodes in the chosen order

    Raises:
        ValueError: If the strategy is unknown or the depth range invalid.
            This is a generator, so the error is raised when iteration
            starts (the first ``next()``), not when the function is called.

    Example:
        >>> [node.value for node in traverse_tree(root, "pre", max_depth=1)]
        [1, 2, 3]
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
    )
    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid traversal configuration: {'; '.join(errors)}")

    logger.debug("Traversing with %s", config)
    traverser = create_traverser(config.strategy, adapter)
    for node, _ in traverser.traverse(
        root,
        max_depth=config.depth.max_depth,
        min_depth=config.depth.min_depth,
    ):
        yield node


def count_nodes(root: Optional[Any],
                adapter: Optional[BinaryTreeAdapter] = None,
                **kwargs) -> int:
    """Count nodes in a tree, optionally within a depth range.

    Args:
        root: Starting node for traversal
        adapter: Adapter for the node type
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes visited
    """
    count = 0
    for _ in traverse_tree(root, adapter=adapter, **kwargs):
        count += 1
    return count


def get_leaf_values(root: Optional[Any],
                    adapter: Optional[BinaryTreeAdapter] = None) -> List[Any]:
    """Get the values of all leaf nodes, left to right."""
    adapter = resolve_adapter(adapter)
    return [
        adapter.get_value(node)
        for node, _ in PreOrderTraverser(adapter).traverse(root)
        if adapter.is_leaf(node)
    ]


def get_tree_stats(root: Optional[Any],
                   adapter: Optional[BinaryTreeAdapter] = None) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes,
        max_depth (root = 0, -1 for an empty tree) and depths
        (depth -> node count)

    Example:
        >>> stats = get_tree_stats(sample_tree())
        >>> stats['leaf_nodes'], stats['max_depth']
        (3, 2)
    """
    adapter = resolve_adapter(adapter)
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': -1,
        'depths': {},
    }

    for node, depth in LevelOrderTraverser(adapter).traverse(root):
        stats['total_nodes'] += 1
        if adapter.is_leaf(node):
            stats['leaf_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats
