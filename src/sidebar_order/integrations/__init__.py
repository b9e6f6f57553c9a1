"""Integrations subpackage for sidebar-order.

Contains integration adapters for external tools:
- Docusaurus sidebar item sorting (sort_sidebar_items)
- pytest plugin (auto-discovered via pytest11 entry point)

The pytest plugin is not imported here so that importing the package never
requires pytest.
"""

from __future__ import annotations

from sidebar_order.integrations._docusaurus import sort_sidebar_items

__all__ = ["sort_sidebar_items"]
