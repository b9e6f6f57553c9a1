"""Deterministic tree generators for performance benchmarks.

All generators produce fixed, reproducible trees. No random values.
Three tiers: 100-node flat, 1,000-node nested, 10,000-node deeply nested.
Each tier comes with an order config that names roughly half of the children
at every category, reversed, plus one stale key per entry.
"""

from __future__ import annotations

from typing import Any

import pytest

from sidebar_order import Node, OrderConfig, TreeBuilder
from sidebar_order.tree.paths import join_path


def generate_mapping(fanout: int, depth: int, prefix: str = "item") -> dict[str, Any]:
    """Generate a nested mapping with *fanout* children per category.

    The last level holds documents; every other level holds categories.
    """
    if depth <= 1:
        return {f"{prefix}-{i:03d}": None for i in range(fanout)}
    return {
        f"{prefix}-{i:03d}": generate_mapping(fanout, depth - 1, prefix) for i in range(fanout)
    }


def generate_order(tree: Node) -> OrderConfig:
    """Order every category by the reverse of its first half, plus a stale key."""
    entries: dict[str, list[str]] = {}
    for node in tree.walk():
        if not node.is_category or not node.children:
            continue
        keys = node.child_keys()
        entries[join_path(node.path)] = [*reversed(keys[: len(keys) // 2]), "stale-entry"]
    return OrderConfig.from_mapping(entries)


def _tier(fanout: int, depth: int) -> tuple[Node, OrderConfig]:
    tree = TreeBuilder().from_mapping(generate_mapping(fanout, depth))
    return tree, generate_order(tree)


@pytest.fixture(scope="session")
def tree_100_flat() -> tuple[Node, OrderConfig]:
    return _tier(100, 1)


@pytest.fixture(scope="session")
def tree_1000_nested() -> tuple[Node, OrderConfig]:
    return _tier(10, 3)


@pytest.fixture(scope="session")
def tree_10000_deep() -> tuple[Node, OrderConfig]:
    return _tier(10, 4)
