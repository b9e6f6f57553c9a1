"""algorithm subpackage: the per-level merge and its policy configuration.

Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from sidebar_order.algorithm import merge_order

    outcome = merge_order(["a", "b", "c", "d"], ["c", "a"], key=lambda k: k)
    outcome.ordered   # ("c", "a", "b", "d")
"""

from __future__ import annotations

from sidebar_order.algorithm.config import ResolverConfig, UnknownKeyPolicy
from sidebar_order.algorithm.merge import MergeOutcome, merge_order

__all__ = ["MergeOutcome", "ResolverConfig", "UnknownKeyPolicy", "merge_order"]
