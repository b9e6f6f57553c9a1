"""pytest plugin for sidebar-order.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import pytest

from sidebar_order import Node, OrderConfig, resolve_with_report
from sidebar_order.tree.paths import split_path


@pytest.fixture(scope="session")
def assert_sidebar_order() -> Any:
    """Fixture that returns a callable sidebar order asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to resolve_with_report() which creates a fresh OrderResolver per call).

    Usage in tests::

        def test_root_order(assert_sidebar_order, docs_tree):
            assert_sidebar_order(docs_tree, {".": ["intro"]}, ".", ["intro", "aem"])

    Returns:
        A callable ``_assert(tree, config, path, expected) -> None`` that raises
        ``AssertionError`` when the resolved order at *path* differs from
        *expected*.
    """

    def _assert(
        tree: Node,
        config: OrderConfig | Mapping[str, Sequence[str]],
        path: str,
        expected: Sequence[str],
    ) -> None:
        """Assert the resolved child order of the category at *path*.

        Raises:
            AssertionError: When the order differs, with a message including
                the actual and expected orders and every diagnostic.
        """
        result = resolve_with_report(tree, config)
        actual = result.order_at(split_path(path))
        if actual != list(expected):
            diagnostics = "\n".join(f"    {d.message}" for d in result.diagnostics) or "    (none)"
            raise AssertionError(
                f"Sidebar order mismatch at {path!r}:\n"
                f"  actual:   {actual}\n"
                f"  expected: {list(expected)}\n"
                f"  diagnostics:\n{diagnostics}"
            )

    return _assert
