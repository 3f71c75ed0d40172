"""Tests for traversal configuration and strategy parsing."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib.config import (
    DepthConfig,
    TraversalConfig,
    TraversalStrategy,
    parse_strategy,
)


class TestParseStrategy(unittest.TestCase):
    """Test strategy names and enum values."""

    def test_enum_passthrough(self):
        for strategy in TraversalStrategy:
            self.assertIs(parse_strategy(strategy), strategy)

    def test_aliases_case_insensitive(self):
        self.assertEqual(parse_strategy("BFS"), TraversalStrategy.LEVEL_ORDER)
        self.assertEqual(parse_strategy("Pre_Order"), TraversalStrategy.PRE_ORDER)
        self.assertEqual(parse_strategy("in"), TraversalStrategy.IN_ORDER)
        self.assertEqual(parse_strategy("dfs_post"), TraversalStrategy.POST_ORDER)

    def test_enum_values_are_aliases(self):
        for strategy in TraversalStrategy:
            self.assertIs(parse_strategy(strategy.value), strategy)

    def test_unknown(self):
        with self.assertRaises(ValueError) as ctx:
            parse_strategy("spiral")
        self.assertIn("spiral", str(ctx.exception))
        self.assertIn("level", str(ctx.exception))


class TestDepthConfig(unittest.TestCase):
    """Test depth range decisions."""

    def test_unlimited(self):
        config = DepthConfig()
        self.assertTrue(config.should_yield(0))
        self.assertTrue(config.should_yield(500))
        self.assertTrue(config.should_explore(500))

    def test_range(self):
        config = DepthConfig(min_depth=1, max_depth=2)
        self.assertFalse(config.should_yield(0))
        self.assertTrue(config.should_yield(1))
        self.assertTrue(config.should_yield(2))
        self.assertFalse(config.should_yield(3))
        self.assertTrue(config.should_explore(1))
        self.assertFalse(config.should_explore(2))


class TestTraversalConfig(unittest.TestCase):
    """Test configuration validation."""

    def test_defaults_valid(self):
        config = TraversalConfig()
        self.assertEqual(config.strategy, TraversalStrategy.LEVEL_ORDER)
        self.assertEqual(config.validate(), [])
        self.assertTrue(config.is_valid())

    def test_negative_depths(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=-1, max_depth=-2))
        errors = config.validate()
        self.assertIn("min_depth cannot be negative", errors)
        self.assertIn("max_depth cannot be negative", errors)
        self.assertFalse(config.is_valid())

    def test_inverted_range(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=4, max_depth=2))
        self.assertEqual(config.validate(), ["max_depth cannot be less than min_depth"])

    def test_strategy_must_be_enum(self):
        config = TraversalConfig(strategy="level")
        self.assertEqual(len(config.validate()), 1)


if __name__ == '__main__':
    unittest.main()
