"""Binary tree traversal strategies for BinTreeLib.

Traversers implement the different orders for walking through a binary
tree. They read nodes through a BinaryTreeAdapter, so they work with any
node type.

None of the traversers recurse: depth-first orders keep an explicit stack
and level order keeps a FIFO frontier, so a degenerate tree as deep as it
is long never reaches the interpreter's recursion limit.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Tuple, Union

from ..config import DepthConfig, TraversalStrategy, parse_strategy
from .adapter import BinaryTreeAdapter, resolve_adapter

logger = logging.getLogger(__name__)


class BinaryTreeTraverser(ABC):
    """Abstract base class for binary tree traversal strategies.

    Traversers implement the algorithms for walking through trees in
    different orders. They are independent of the node type, working
    through the BinaryTreeAdapter.
    """

    def __init__(self, adapter: Optional[BinaryTreeAdapter] = None):
        """Initialize traverser with an adapter.

        Args:
            adapter: BinaryTreeAdapter for navigating the tree
                (None = default value/left/right adapter)
        """
        self.adapter = resolve_adapter(adapter)

    @abstractmethod
    def traverse(self,
                 root: Optional[Any],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None = empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _children(self, node: Any, depth: int, depth_config: DepthConfig) -> List[Any]:
        """Children of node that should be visited, left before right."""
        if not depth_config.should_explore(depth):
            return []
        return list(self.adapter.get_children(node))


class PreOrderTraverser(BinaryTreeTraverser):
    """Depth-first pre-order traversal: parent, left subtree, right subtree."""

    def traverse(self,
                 root: Optional[Any],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        if root is None:
            return
        depth_config = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        stack: List[Tuple[Any, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            if depth_config.should_yield(depth):
                yield (node, depth)

            # Push right first so the left subtree is popped first
            for child in reversed(self._children(node, depth, depth_config)):
                stack.append((child, depth + 1))


class InOrderTraverser(BinaryTreeTraverser):
    """Depth-first in-order traversal: left subtree, parent, right subtree."""

    def traverse(self,
                 root: Optional[Any],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        if root is None:
            return
        depth_config = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        # Frames are (node, depth, expanded)
        stack: List[Tuple[Any, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                if depth_config.should_yield(depth):
                    yield (node, depth)
                continue

            explore = depth_config.should_explore(depth)
            right = self.adapter.get_right(node) if explore else None
            left = self.adapter.get_left(node) if explore else None
            if right is not None:
                stack.append((right, depth + 1, False))
            stack.append((node, depth, True))
            if left is not None:
                stack.append((left, depth + 1, False))


class PostOrderTraverser(BinaryTreeTraverser):
    """Depth-first post-order traversal: left subtree, right subtree, parent.

    Each stack frame carries a visit-state flag. A node is first pushed
    unexpanded; when popped it is pushed back expanded beneath its
    children, so it is only yielded once both subtrees are done.
    """

    def traverse(self,
                 root: Optional[Any],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        if root is None:
            return
        depth_config = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        stack: List[Tuple[Any, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                if depth_config.should_yield(depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            for child in reversed(self._children(node, depth, depth_config)):
                stack.append((child, depth + 1, False))


class LevelOrderTraverser(BinaryTreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1, left
    to right within a row. Uses a FIFO frontier: dequeue one node, yield
    it, enqueue its present children left then right.
    """

    def traverse(self,
                 root: Optional[Any],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        if root is None:
            return
        depth_config = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        queue: Deque[Tuple[Any, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()
            if depth_config.should_yield(depth):
                yield (node, depth)

            for child in self._children(node, depth, depth_config):
                queue.append((child, depth + 1))


_TRAVERSERS = {
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.IN_ORDER: InOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}


def create_traverser(strategy: Union[TraversalStrategy, str],
                     adapter: Optional[BinaryTreeAdapter] = None) -> BinaryTreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or name (pre, in, post, level, bfs, ...)
        adapter: BinaryTreeAdapter for the node type (None = default)

    Returns:
        BinaryTreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    parsed = parse_strategy(strategy)
    traverser_class = _TRAVERSERS[parsed]
    logger.debug("Selected %s for strategy %r", traverser_class.__name__, strategy)
    return traverser_class(adapter)
