"""Testing utilities for BinTreeLib consumers."""

from .fixtures import (
    all_nodes,
    build_chain,
    build_tree,
    build_tree_from_level_order,
    sample_tree,
)

__all__ = [
    'all_nodes',
    'build_chain',
    'build_tree',
    'build_tree_from_level_order',
    'sample_tree',
]
