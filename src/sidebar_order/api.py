"""Public API functions for sidebar-order.

This module provides the user-facing functions resolve, resolve_with_report,
and resolved_order. Each call creates a fresh OrderResolver so that no state
carries over between builds.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from sidebar_order.algorithm.config import ResolverConfig
from sidebar_order.order_config import OrderConfig
from sidebar_order.resolver import OrderResolver
from sidebar_order.result import ResolutionResult
from sidebar_order.tree.nodes import Node
from sidebar_order.tree.paths import split_path

__all__ = ["resolve", "resolve_with_report", "resolved_order"]

logger = logging.getLogger(__name__)


def _coerce(config: OrderConfig | Mapping[str, Sequence[str]]) -> OrderConfig:
    if isinstance(config, OrderConfig):
        return config
    return OrderConfig.from_mapping(config)


def resolve_with_report(
    tree: Node,
    config: OrderConfig | Mapping[str, Sequence[str]],
    resolver_config: ResolverConfig | None = None,
) -> ResolutionResult:
    """Resolve *tree* against *config* and return the tree with its diagnostics.

    Nothing is logged; the caller decides what to do with the diagnostics.

    Args:
        tree:            Root of a loader-produced tree.
        config:          An OrderConfig, or a plain ``{path: [key, ...]}``
                         mapping that is validated on the way in.
        resolver_config: Diagnostic policy.  Defaults to ``ResolverConfig()``.

    Raises:
        StructuralError: If the tree has duplicate sibling keys.
        ConfigError: If a plain mapping fails validation, or (as
            UnknownKeyError) if the policy is ERROR and keys are unknown.
    """
    return OrderResolver(_coerce(config), config=resolver_config).resolve(tree)


def resolve(
    tree: Node,
    config: OrderConfig | Mapping[str, Sequence[str]],
    resolver_config: ResolverConfig | None = None,
) -> Node:
    """Return *tree* with every category's children in resolved order.

    A pure function of ``(tree, config)``: no node is added or removed, and
    resolving the result again with the same config returns an equal tree.
    Collected diagnostics are logged once, after the whole pass.

    Args:
        tree:            Root of a loader-produced tree.
        config:          An OrderConfig or a plain ``{path: [key, ...]}`` mapping.
        resolver_config: Diagnostic policy.  Defaults to ``ResolverConfig()``.

    Returns:
        The resolved root Node.
    """
    result = resolve_with_report(tree, config, resolver_config)
    result.log(logger)
    return result.tree


def resolved_order(
    tree: Node,
    config: OrderConfig | Mapping[str, Sequence[str]],
    path: str | Iterable[str] = ".",
) -> list[str]:
    """Return the resolved child keys of the category at *path*.

    Args:
        tree:   Root of a loader-produced tree.
        config: An OrderConfig or a plain mapping.
        path:   A joined path string (``"."`` for the root) or a segment sequence.

    Raises:
        KeyError: If *path* does not exist in the tree.
    """
    segments = split_path(path) if isinstance(path, str) else tuple(path)
    return resolve_with_report(tree, config).order_at(segments)
