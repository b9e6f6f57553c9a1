"""TreeBuilder: produces documentation trees in their default (loader) order.

Two sources are supported:

- Nested mappings: a dict value is a category, ``None`` is a document.
  Insertion order is the loader order.
- A docs directory on disk: directories are categories, files with a document
  extension are documents keyed by their filename stem. Entries are ordered
  lexicographically by name, which is the deterministic final tie-break for
  everything the order config does not mention.

Both sources reject sibling key collisions with a StructuralError, so trees
handed to the resolver always satisfy the unique-sibling-key invariant.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from sidebar_order.exceptions import StructuralError
from sidebar_order.tree.nodes import Node, NodeKind
from sidebar_order.tree.paths import join_path, segment_problem

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".mdx")

# Docusaurus skips files and directories starting with these prefixes.
_IGNORED_PREFIXES = ("_", ".")

_Source = TypeVar("_Source")


@dataclass(frozen=True)
class TreeBuilder:
    """Builds Node trees from mappings or from a docs directory.

    Attributes:
        extensions: File suffixes treated as documents when scanning a
            directory. Matching is case-insensitive.

    Example::

        builder = TreeBuilder()
        tree = builder.from_mapping({"javascript": {"01-introduction": None}})
        # tree: CATEGORY(".") -> CATEGORY("javascript") -> DOCUMENT("01-introduction")
    """

    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

    def __post_init__(self) -> None:
        if not self.extensions:
            msg = "extensions must not be empty"
            raise ValueError(msg)
        normalized = tuple(
            (ext if ext.startswith(".") else f".{ext}").lower() for ext in self.extensions
        )
        object.__setattr__(self, "extensions", normalized)

    # ------------------------------------------------------------------
    # Mappings
    # ------------------------------------------------------------------

    def from_mapping(self, mapping: Mapping[str, Any]) -> Node:
        """Build a tree from a nested mapping rooted at the docs root.

        Args:
            mapping: ``{key: sub_mapping_or_None}``. Sub-mappings are
                categories (possibly empty); ``None`` marks a document.

        Returns:
            The root category Node.

        Raises:
            StructuralError: If a key is malformed or a mapping contains
                itself.
            TypeError: If a value is neither a mapping nor None.
        """
        return _assemble(mapping, _mapping_entries, id)

    # ------------------------------------------------------------------
    # Directories
    # ------------------------------------------------------------------

    def from_directory(self, root: str | Path) -> Node:
        """Scan a docs directory into a tree.

        Args:
            root: The docs root. Its own name does not appear in any path.

        Returns:
            The root category Node.

        Raises:
            NotADirectoryError: If *root* is not a directory.
            StructuralError: If two siblings resolve to the same key, or a
                symlink leads back into an enclosing directory.
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise NotADirectoryError(f"Docs root is not a directory: {root_path}")
        tree = _assemble(root_path, self._directory_entries, Path.resolve)
        logger.debug("Loaded %d nodes from %s", sum(1 for _ in tree.walk()), root_path)
        return tree

    def _directory_entries(
        self, path: tuple[str, ...], directory: Path
    ) -> list[tuple[str, Path | None]]:
        entries: list[tuple[str, Path | None]] = []
        seen: dict[str, Path] = {}
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.name.startswith(_IGNORED_PREFIXES):
                continue
            if entry.is_dir():
                key = entry.name
            elif entry.is_file() and entry.suffix.lower() in self.extensions:
                key = entry.stem
            else:
                continue

            if key in seen:
                raise StructuralError(
                    f"Duplicate key {key!r} from {seen[key].name!r} and {entry.name!r}",
                    _display(path),
                )
            seen[key] = entry
            entries.append((key, entry if entry.is_dir() else None))
        return entries


def _mapping_entries(
    path: tuple[str, ...], mapping: Mapping[str, Any]
) -> list[tuple[str, Mapping[str, Any] | None]]:
    entries = list(mapping.items())
    for key, value in entries:
        problem = segment_problem(key)
        if problem is not None:
            raise StructuralError(f"Malformed key: {problem}", _display(path))
        if value is not None and not isinstance(value, Mapping):
            raise TypeError(
                f"Unsupported tree value at {join_path((*path, key))!r}: {type(value)!r}"
            )
    return entries


def _assemble(
    root: _Source,
    entries_of: Callable[[tuple[str, ...], _Source], list[tuple[str, _Source | None]]],
    identity: Callable[[_Source], Hashable],
) -> Node:
    """Build a category tree bottom-up with an explicit stack.

    *entries_of* lists a category's ``(key, source)`` pairs in loader order;
    a ``None`` source is a document. *identity* detects a category that
    encloses itself.
    """
    # (path, source, child count); a count of -1 means not yet expanded.
    stack: list[tuple[tuple[str, ...], _Source | None, int]] = [((), root, -1)]
    active: set[Hashable] = set()
    done: list[Node] = []
    while stack:
        path, source, count = stack.pop()
        if source is None:
            done.append(Node(path=path, kind=NodeKind.DOCUMENT))
            continue
        if count >= 0:
            active.discard(identity(source))
            start = len(done) - count
            children = tuple(done[start:])
            del done[start:]
            done.append(Node(path=path, kind=NodeKind.CATEGORY, children=children))
            continue

        marker = identity(source)
        if marker in active:
            raise StructuralError("Cyclic reference to an enclosing category", _display(path))
        active.add(marker)
        entries = entries_of(path, source)
        stack.append((path, source, len(entries)))
        stack.extend(((*path, key), child, -1) for key, child in reversed(entries))
    return done.pop()


def _display(path: tuple[str, ...]) -> str:
    try:
        return join_path(path)
    except ValueError:
        return repr(path)
