"""Configuration system for BinTreeLib.

This module defines how users specify the order and depth range of a
generic traversal.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class TraversalStrategy(Enum):
    """Order in which nodes are visited."""
    PRE_ORDER = "pre"       # Parent, left, right
    IN_ORDER = "in"         # Left, parent, right
    POST_ORDER = "post"     # Left, right, parent
    LEVEL_ORDER = "level"   # Row by row, left to right


# String aliases accepted wherever a strategy is expected
STRATEGY_ALIASES = {
    'pre': TraversalStrategy.PRE_ORDER,
    'preorder': TraversalStrategy.PRE_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'dfs': TraversalStrategy.PRE_ORDER,
    'dfs_pre': TraversalStrategy.PRE_ORDER,
    'in': TraversalStrategy.IN_ORDER,
    'inorder': TraversalStrategy.IN_ORDER,
    'in_order': TraversalStrategy.IN_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'postorder': TraversalStrategy.POST_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'dfs_post': TraversalStrategy.POST_ORDER,
    'level': TraversalStrategy.LEVEL_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
    'bfs': TraversalStrategy.LEVEL_ORDER,
    'breadth_first': TraversalStrategy.LEVEL_ORDER,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string alias

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in STRATEGY_ALIASES:
        return STRATEGY_ALIASES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(STRATEGY_ALIASES.keys())}"
    )


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering (root is depth 0)."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded."""
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be visited."""
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a generic traversal."""

    strategy: TraversalStrategy = TraversalStrategy.LEVEL_ORDER
    depth: DepthConfig = field(default_factory=DepthConfig)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0
