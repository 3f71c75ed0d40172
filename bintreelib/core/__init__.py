"""Core components: node container, adapter and traversers."""

from .node import TreeNode
from .adapter import BinaryTreeAdapter, InvalidNodeError, DEFAULT_ADAPTER
from .traverser import (
    BinaryTreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    'TreeNode',
    'BinaryTreeAdapter',
    'InvalidNodeError',
    'DEFAULT_ADAPTER',
    'BinaryTreeTraverser',
    'PreOrderTraverser',
    'InOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
]
