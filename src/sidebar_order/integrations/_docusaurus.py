"""Docusaurus sidebar item adapter.

Docusaurus describes an autogenerated sidebar as a list of item dicts::

    {"type": "doc", "id": "aem/architecture"}
    {"type": "category", "label": "Components", "items": [...]}
    {"type": "link", "label": "GitHub", "href": "https://..."}

Category items carry only their display label, so the directory name used as
the ordering key is recovered from the categories metadata (directory path ->
``{"label": ...}``) that Docusaurus collects from ``_category_.json`` files.
Items with no recoverable key (links, html, categories missing from the
metadata) are never matched by the order and keep their default position
among the appended remainder.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sidebar_order.algorithm.merge import merge_order
from sidebar_order.order_config import OrderConfig
from sidebar_order.result import Diagnostic, DiagnosticKind, Severity
from sidebar_order.tree.paths import ROOT_KEY, SEPARATOR

SidebarItem = dict[str, Any]
CategoriesMetadata = Mapping[str, Mapping[str, Any]]


def _labels_to_dirnames(current_dir: str, metadata: CategoriesMetadata) -> dict[str, str]:
    """Map category labels to directory names for categories directly under *current_dir*."""
    mapping: dict[str, str] = {}
    for category_path, meta in metadata.items():
        parent, _, dirname = category_path.rpartition(SEPARATOR)
        label = meta.get("label")
        if (parent or ROOT_KEY) == current_dir and label:
            mapping[label] = dirname
    return mapping


def _item_key(item: SidebarItem, labels: Mapping[str, str]) -> str | None:
    if item.get("type") == "doc" and item.get("id"):
        return str(item["id"]).rpartition(SEPARATOR)[2]
    if item.get("type") == "category":
        return labels.get(item.get("label", ""))
    return None


def sort_sidebar_items(
    items: Sequence[SidebarItem],
    order_config: OrderConfig,
    categories_metadata: CategoriesMetadata | None = None,
    current_dir: str = ROOT_KEY,
    diagnostics: list[Diagnostic] | None = None,
) -> list[SidebarItem]:
    """Recursively order Docusaurus sidebar items by *order_config*.

    Args:
        items:               Sidebar items for *current_dir* in default order.
        order_config:        Explicit per-directory orders.
        categories_metadata: Directory path -> category metadata with a
                             ``label``. Without it no category can be matched.
        current_dir:         Directory the items belong to (``"."`` for the root).
        diagnostics:         When given, unknown and duplicate configured keys
                             are appended to it as warnings.

    Returns:
        A new list; the input items are not mutated. Category items whose
        children were reordered are shallow copies with a new ``items`` list.
    """
    metadata = categories_metadata or {}
    labels = _labels_to_dirnames(current_dir, metadata)

    processed: list[SidebarItem] = []
    for item in items:
        if item.get("type") == "category" and item.get("items"):
            dirname = labels.get(item.get("label", ""))
            if dirname:
                child_dir = dirname if current_dir == ROOT_KEY else f"{current_dir}{SEPARATOR}{dirname}"
                item = {
                    **item,
                    "items": sort_sidebar_items(
                        item["items"], order_config, metadata, child_dir, diagnostics
                    ),
                }
        processed.append(item)

    explicit = order_config.lookup(current_dir)
    if explicit is None:
        return processed

    outcome = merge_order(processed, explicit, key=lambda item: _item_key(item, labels))
    if diagnostics is not None:
        diagnostics.extend(
            Diagnostic(DiagnosticKind.UNKNOWN_KEY, Severity.WARNING, current_dir, key)
            for key in outcome.unknown_keys
        )
        diagnostics.extend(
            Diagnostic(DiagnosticKind.DUPLICATE_KEY, Severity.WARNING, current_dir, key)
            for key in outcome.duplicate_keys
        )
    return list(outcome.ordered)
