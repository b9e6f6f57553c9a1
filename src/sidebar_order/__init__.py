"""sidebar-order - configuration-driven sidebar ordering for documentation trees."""

from __future__ import annotations

from sidebar_order.algorithm.config import ResolverConfig, UnknownKeyPolicy
from sidebar_order.api import resolve, resolve_with_report, resolved_order
from sidebar_order.exceptions import (
    ConfigError,
    SidebarOrderError,
    StructuralError,
    UnknownKeyError,
)
from sidebar_order.order_config import OrderConfig
from sidebar_order.resolver import OrderResolver
from sidebar_order.result import Diagnostic, DiagnosticKind, ResolutionResult, Severity
from sidebar_order.tree import Node, NodeKind, TreeBuilder

__version__: str = "0.1.0"
__all__: list[str] = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "Node",
    "NodeKind",
    "OrderConfig",
    "OrderResolver",
    "ResolutionResult",
    "ResolverConfig",
    "Severity",
    "SidebarOrderError",
    "StructuralError",
    "TreeBuilder",
    "UnknownKeyError",
    "UnknownKeyPolicy",
    "resolve",
    "resolve_with_report",
    "resolved_order",
]
