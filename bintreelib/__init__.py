"""BinTreeLib - Read-only traversal queries over binary trees.

BinTreeLib computes aggregates, structural predicates and traversal
orderings over any binary tree whose nodes expose a value and two child
references. It never creates, mutates or destroys the caller's nodes.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bintreelib import TreeNode, find_all_root_to_leaf_paths

    root = TreeNode(1, TreeNode(2), TreeNode(3))
    find_all_root_to_leaf_paths(root)   # [[1, 2], [1, 3]]
━━━━━━━━━━━━━━━━━━━━━━━━━━

Nodes with other attribute names are handled by passing a
BinaryTreeAdapter to any function.
"""

__version__ = "0.1.0"

# Core components
from .core.node import TreeNode
from .core.adapter import BinaryTreeAdapter, InvalidNodeError
from .core.traverser import (
    BinaryTreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

# Configuration
from .config import TraversalConfig, TraversalStrategy, DepthConfig

# High-level API
from .api import (
    sum_leaf_nodes,
    count_internal_nodes,
    count_distinct_values,
    build_post_order_string,
    collect_level_order_values,
    has_strictly_increasing_path,
    have_same_shape,
    find_all_root_to_leaf_paths,
    traverse_tree,
    count_nodes,
    get_leaf_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'TreeNode',
    'BinaryTreeAdapter',
    'InvalidNodeError',
    'BinaryTreeTraverser',
    'PreOrderTraverser',
    'InOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DepthConfig',
    # API
    'sum_leaf_nodes',
    'count_internal_nodes',
    'count_distinct_values',
    'build_post_order_string',
    'collect_level_order_values',
    'has_strictly_increasing_path',
    'have_same_shape',
    'find_all_root_to_leaf_paths',
    'traverse_tree',
    'count_nodes',
    'get_leaf_values',
    'get_tree_stats',
]
