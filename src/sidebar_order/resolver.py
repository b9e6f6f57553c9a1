"""OrderResolver: applies an OrderConfig to every level of a documentation tree.

This is the central layer between the per-level merge and the public API.
It walks the tree, orders each category's children, and collects every
configuration-drift diagnostic into one ResolutionResult.

Architecture:
- resolve() checks sibling key uniqueness at every category before ordering
  it; a duplicate aborts the pass at once with a StructuralError.
- Categories with no config entry keep their loader order untouched.
- Categories with an entry are ordered by merge_order(); unknown keys,
  duplicate keys, and appended children become diagnostics.
- Diagnostics are only collected during the walk. Unknown-path checks and the
  UnknownKeyPolicy.ERROR raise happen after the whole tree is resolved, so an
  editor sees the complete list in one pass.
"""

from __future__ import annotations

import logging

from sidebar_order.algorithm.config import ResolverConfig, UnknownKeyPolicy
from sidebar_order.algorithm.merge import merge_order
from sidebar_order.exceptions import StructuralError, UnknownKeyError
from sidebar_order.order_config import OrderConfig
from sidebar_order.result import Diagnostic, DiagnosticKind, ResolutionResult, Severity
from sidebar_order.tree.nodes import Node

__all__ = ["OrderResolver"]

logger = logging.getLogger(__name__)


class OrderResolver:
    """Resolves sibling order for a whole documentation tree.

    The resolver holds no state between calls: resolving the same tree twice
    gives equal results, and resolving an already-resolved tree against the
    same OrderConfig leaves it unchanged.

    Example::

        from sidebar_order import OrderConfig, OrderResolver, TreeBuilder

        tree = TreeBuilder().from_mapping({"strapi": {}, "java": {}, "aem": {}, "javascript": {}})
        resolver = OrderResolver(OrderConfig.from_mapping({".": ["javascript", "java"]}))
        result = resolver.resolve(tree)
        result.order_at()   # ["javascript", "java", "strapi", "aem"]
    """

    def __init__(
        self,
        order_config: OrderConfig,
        config: ResolverConfig | None = None,
    ) -> None:
        """Initialise the resolver.

        Args:
            order_config: Explicit per-path orders.
            config:       Diagnostic policy.  Defaults to ``ResolverConfig()``.
        """
        self._order_config = order_config
        self._config: ResolverConfig = config if config is not None else ResolverConfig()

    @property
    def order_config(self) -> OrderConfig:
        return self._order_config

    @property
    def config(self) -> ResolverConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, tree: Node) -> ResolutionResult:
        """Order the children of every category in *tree*.

        Args:
            tree: Root of a loader-produced tree.

        Returns:
            A ResolutionResult holding the resolved tree and all diagnostics.

        Raises:
            StructuralError: If any category has duplicate child keys.
            UnknownKeyError: If the policy is ERROR and any configured key
                matched no child.
        """
        diagnostics: list[Diagnostic] = []
        visited: set[str] = set()

        resolved = self._resolve_tree(tree, diagnostics, visited)

        if self._config.report_unknown_paths:
            for path in self._order_config:
                if path not in visited:
                    diagnostics.append(
                        Diagnostic(DiagnosticKind.UNKNOWN_PATH, Severity.WARNING, path)
                    )

        if self._config.unknown_key_policy == UnknownKeyPolicy.ERROR:
            unknown = [d for d in diagnostics if d.kind == DiagnosticKind.UNKNOWN_KEY]
            if unknown:
                raise UnknownKeyError(unknown)

        logger.debug(
            "Resolved %d categories (%d configured), %d diagnostic(s)",
            len(visited),
            sum(1 for path in visited if path in self._order_config),
            len(diagnostics),
        )
        return ResolutionResult(tree=resolved, diagnostics=tuple(diagnostics))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _resolve_tree(
        self,
        tree: Node,
        diagnostics: list[Diagnostic],
        visited: set[str],
    ) -> Node:
        # Post-order walk with an explicit stack so tree depth is not bounded
        # by the interpreter's recursion limit. Resolved nodes collect on
        # ``done``; a category pops its resolved children off the end.
        stack: list[tuple[Node, bool]] = [(tree, False)]
        done: list[Node] = []
        while stack:
            node, expanded = stack.pop()
            if not node.is_category:
                done.append(node)
                continue
            if not expanded:
                visited.add(node.joined_path)
                _check_unique_keys(node)
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
                continue
            start = len(done) - len(node.children)
            children = done[start:]
            del done[start:]
            done.append(self._order_children(node, children, diagnostics))
        return done.pop()

    def _order_children(
        self,
        node: Node,
        children: list[Node],
        diagnostics: list[Diagnostic],
    ) -> Node:
        path = node.joined_path
        explicit = self._order_config.lookup(path)
        if explicit is None:
            return node.with_children(children)

        outcome = merge_order(children, explicit, key=lambda child: child.key)

        if self._config.unknown_key_policy != UnknownKeyPolicy.IGNORE:
            diagnostics.extend(
                Diagnostic(DiagnosticKind.UNKNOWN_KEY, Severity.WARNING, path, key)
                for key in outcome.unknown_keys
            )
        diagnostics.extend(
            Diagnostic(DiagnosticKind.DUPLICATE_KEY, Severity.WARNING, path, key)
            for key in outcome.duplicate_keys
        )
        if self._config.report_unconfigured:
            diagnostics.extend(
                Diagnostic(DiagnosticKind.UNCONFIGURED_CHILD, Severity.NOTICE, path, key)
                for key in outcome.unconfigured_keys
            )

        return node.with_children(outcome.ordered)


def _check_unique_keys(node: Node) -> None:
    seen: set[str] = set()
    for child in node.children:
        if child.key in seen:
            raise StructuralError(f"Duplicate sibling key {child.key!r}", node.joined_path)
        seen.add(child.key)
