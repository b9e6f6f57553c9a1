"""Node dataclass and NodeKind StrEnum for the documentation tree.

Provides the foundational data types produced by TreeBuilder and consumed by
OrderResolver. Nodes are immutable: resolving a tree builds new nodes with
reordered ``children`` tuples rather than mutating the input.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from sidebar_order.exceptions import StructuralError
from sidebar_order.tree.paths import ROOT_KEY, join_path, segment_problem


class NodeKind(StrEnum):
    """The two kinds of node in a documentation tree.

    - CATEGORY -> "category" : a directory; owns ordered children
    - DOCUMENT -> "document" : a single content file; always a leaf
    """

    CATEGORY = auto()
    DOCUMENT = auto()


@dataclass(frozen=True, slots=True)
class Node:
    """A category or document in the documentation tree.

    Attributes:
        path:     Segments from the docs root, e.g.
                  ``("javascript", "beginners-guide", "01-introduction")``.
                  The root category has the empty tuple.
        kind:     Whether this node is a category or a document.
        children: Child nodes in their current order. Always empty for
                  documents.

    Construction checks that every child sits exactly one segment below its
    parent and that documents have no children. It does not check sibling
    key uniqueness; the resolver does that while walking.
    """

    path: tuple[str, ...]
    kind: NodeKind = NodeKind.CATEGORY
    children: tuple[Node, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept lists from callers; store tuples so the node stays hashable.
        if not isinstance(self.path, tuple):
            object.__setattr__(self, "path", tuple(self.path))
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

        for segment in self.path:
            problem = segment_problem(segment)
            if problem is not None:
                raise StructuralError(f"Malformed node path: {problem}", repr(self.path))

        if self.kind == NodeKind.DOCUMENT and self.children:
            raise StructuralError("Document node cannot have children", self.joined_path)

        depth = len(self.path)
        for child in self.children:
            if len(child.path) != depth + 1 or child.path[:depth] != self.path:
                raise StructuralError(
                    f"Child path {join_path(child.path)!r} is not directly below its parent",
                    self.joined_path,
                )

    @property
    def key(self) -> str:
        """Identifier used for ordering lookups at the parent level."""
        return self.path[-1] if self.path else ROOT_KEY

    @property
    def joined_path(self) -> str:
        """The path string used to look this node up in an OrderConfig."""
        return join_path(self.path)

    @property
    def is_category(self) -> bool:
        return self.kind == NodeKind.CATEGORY

    def child_keys(self) -> list[str]:
        """Keys of the children in their current order."""
        return [child.key for child in self.children]

    def child(self, key: str) -> Node | None:
        """Return the direct child with *key*, or None."""
        for candidate in self.children:
            if candidate.key == key:
                return candidate
        return None

    def find(self, path: Iterable[str]) -> Node | None:
        """Return the descendant at *path* (relative to this node), or None."""
        node: Node | None = self
        for segment in path:
            if node is None:
                return None
            node = node.child(segment)
        return node

    def walk(self) -> Iterator[Node]:
        """Yield this node and every descendant in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def with_children(self, children: Iterable[Node]) -> Node:
        """Return a copy of this node with *children* replacing its own."""
        return Node(path=self.path, kind=self.kind, children=tuple(children))

    # ------------------------------------------------------------------
    # Plain-data form
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Convert to a nested dict for JSON serialization."""
        result = _plain(self)
        stack = [(self, result)]
        while stack:
            node, data = stack.pop()
            for child in node.children:
                child_data = _plain(child)
                data["children"].append(child_data)
                if child.children:
                    stack.append((child, child_data))
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Node:
        """Rebuild a tree from the output of :meth:`to_dict`.

        The top-level dict is treated as the root regardless of its ``key``.

        Raises:
            StructuralError: If an entry is not a dict, is missing its key,
                has an unknown kind, or has a ``children`` value that is not
                a list.
        """
        # Children are built before their parent, bottom-up on ``done``.
        stack: list[tuple[object, tuple[Any, ...], bool]] = [(data, (), False)]
        done: list[Node] = []
        while stack:
            entry, path, expanded = stack.pop()
            if not isinstance(entry, Mapping):
                raise StructuralError(
                    f"Node entry must be a dict, got {type(entry).__name__}", repr(path)
                )
            children = entry.get("children", ())
            if not expanded:
                if not isinstance(children, (list, tuple)):
                    raise StructuralError(
                        f"Node children must be a list, got {type(children).__name__}",
                        repr(path),
                    )
                stack.append((entry, path, True))
                stack.extend(
                    (child, (*path, _entry_key(child)), False) for child in reversed(children)
                )
                continue

            try:
                kind = NodeKind(entry.get("kind", NodeKind.CATEGORY))
            except ValueError:
                raise StructuralError(
                    f"Unknown node kind {entry.get('kind')!r}", repr(path)
                ) from None
            start = len(done) - len(children)
            built = tuple(done[start:])
            del done[start:]
            done.append(cls(path=path, kind=kind, children=built))
        return done.pop()


def _plain(node: Node) -> dict[str, Any]:
    data: dict[str, Any] = {"key": node.key, "kind": str(node.kind)}
    if node.is_category:
        data["children"] = []
    return data


def _entry_key(entry: object) -> Any:
    return entry.get("key") if isinstance(entry, Mapping) else None
