#!/usr/bin/env python3
"""
Basic usage of BinTreeLib.

This example demonstrates:
- Running every query on a small tree
- Traversing in different orders with depth limits
- Using an adapter for a node class with different attribute names
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import (
    BinaryTreeAdapter,
    TreeNode,
    build_post_order_string,
    collect_level_order_values,
    count_distinct_values,
    count_internal_nodes,
    find_all_root_to_leaf_paths,
    get_tree_stats,
    has_strictly_increasing_path,
    have_same_shape,
    sum_leaf_nodes,
    traverse_tree,
)


class ListNode:
    """A LeetCode-style node storing its value in ``val``."""

    def __init__(self, val, left=None, right=None):
        self.val = val
        self.left = left
        self.right = right


def main():
    #       1
    #      / \
    #     2   3
    #    / \   \
    #   4   5   6
    root = TreeNode(1,
                    TreeNode(2, TreeNode(4), TreeNode(5)),
                    TreeNode(3, None, TreeNode(6)))

    print("=" * 50)
    print("Queries")
    print("=" * 50)
    print(f"Sum of leaves:          {sum_leaf_nodes(root)}")
    print(f"Internal nodes:         {count_internal_nodes(root)}")
    print(f"Distinct values:        {count_distinct_values(root)}")
    print(f"Post-order string:      {build_post_order_string(root)}")
    print(f"Level order:            {collect_level_order_values(root)}")
    print(f"Increasing path exists: {has_strictly_increasing_path(root)}")
    print(f"Root-to-leaf paths:     {find_all_root_to_leaf_paths(root)}")

    print("\n" + "=" * 50)
    print("Traversal orders (max_depth=1)")
    print("=" * 50)
    for strategy in ("pre", "in", "post", "level"):
        values = [node.value for node in traverse_tree(root, strategy, max_depth=1)]
        print(f"  {strategy:<6} {values}")

    stats = get_tree_stats(root)
    print(f"\nStats: {stats['total_nodes']} nodes, {stats['leaf_nodes']} leaves, "
          f"max depth {stats['max_depth']}")

    print("\n" + "=" * 50)
    print("Foreign node types")
    print("=" * 50)
    adapter = BinaryTreeAdapter(value_attr="val")
    other = ListNode(7, ListNode(8, ListNode(9), ListNode(10)), ListNode(11, None, ListNode(12)))
    print(f"Paths:      {find_all_root_to_leaf_paths(other, adapter)}")
    print(f"Same shape: {have_same_shape(root, other, adapter)}")


if __name__ == "__main__":
    main()
