"""Tests for Node dataclass and NodeKind StrEnum.

Verifies:
- NodeKind has exactly 2 members with lowercase string values (StrEnum property)
- Node constructs correctly and derives key / joined_path from its path
- Construction rejects malformed paths, misplaced children, and document children
- Nodes are immutable and compare structurally (order included)
- walk(), find(), child(), with_children(), to_dict()/from_dict()
"""

from __future__ import annotations

import sys
from dataclasses import FrozenInstanceError

import pytest

from sidebar_order.exceptions import StructuralError
from sidebar_order.tree.nodes import Node, NodeKind


def doc(*path: str) -> Node:
    return Node(path=path, kind=NodeKind.DOCUMENT)


class TestNodeKind:
    """Tests for the NodeKind StrEnum."""

    def test_has_exactly_two_members(self) -> None:
        assert len(NodeKind) == 2

    def test_values_are_lowercased(self) -> None:
        """auto() on StrEnum yields the lowercased member name (Python 3.11+)."""
        assert NodeKind.CATEGORY == "category"
        assert NodeKind.DOCUMENT == "document"

    def test_members_are_str_instances(self) -> None:
        for member in NodeKind:
            assert isinstance(member, str), f"{member!r} is not a str instance"


class TestNodeConstruction:
    """Tests for Node construction and derived properties."""

    def test_root_defaults(self) -> None:
        root = Node(path=())
        assert root.kind == NodeKind.CATEGORY
        assert root.children == ()
        assert root.key == "."
        assert root.joined_path == "."

    def test_key_is_last_segment(self) -> None:
        node = doc("javascript", "beginners-guide", "02-variables-and-types")
        assert node.key == "02-variables-and-types"
        assert node.joined_path == "javascript/beginners-guide/02-variables-and-types"

    def test_list_inputs_are_stored_as_tuples(self) -> None:
        node = Node(path=["aem"], children=[doc("aem", "architecture")])  # type: ignore[arg-type]
        assert node.path == ("aem",)
        assert isinstance(node.children, tuple)

    def test_is_category(self) -> None:
        assert Node(path=("aem",)).is_category
        assert not doc("aem", "intro").is_category

    def test_document_with_children_rejected(self) -> None:
        with pytest.raises(StructuralError, match="Document node cannot have children"):
            Node(path=("a",), kind=NodeKind.DOCUMENT, children=(doc("a", "b"),))

    def test_child_not_directly_below_parent_rejected(self) -> None:
        with pytest.raises(StructuralError, match="not directly below"):
            Node(path=("a",), children=(doc("b", "c"),))

    def test_grandchild_path_rejected(self) -> None:
        with pytest.raises(StructuralError):
            Node(path=(), children=(doc("a", "b"),))

    @pytest.mark.parametrize("segment", ["", "a/b", ".", ".."])
    def test_malformed_segment_rejected(self, segment: str) -> None:
        with pytest.raises(StructuralError, match="Malformed node path"):
            Node(path=("docs", segment))

    def test_structural_error_carries_path(self) -> None:
        with pytest.raises(StructuralError) as exc_info:
            Node(path=("aem", "intro"), kind=NodeKind.DOCUMENT, children=(doc("aem", "intro", "x"),))
        assert exc_info.value.path == "aem/intro"


class TestNodeImmutability:
    def test_cannot_assign_children(self) -> None:
        node = Node(path=())
        with pytest.raises(FrozenInstanceError):
            node.children = (doc("a"),)  # type: ignore[misc]

    def test_equality_includes_order(self) -> None:
        a = Node(path=(), children=(doc("a"), doc("b")))
        b = Node(path=(), children=(doc("a"), doc("b")))
        c = Node(path=(), children=(doc("b"), doc("a")))
        assert a == b
        assert a != c

    def test_nodes_are_hashable(self) -> None:
        node = Node(path=(), children=(doc("a"),))
        assert hash(node) == hash(Node(path=(), children=(doc("a"),)))


class TestNodeNavigation:
    @pytest.fixture
    def tree(self) -> Node:
        guide = Node(
            path=("javascript", "beginners-guide"),
            children=(
                doc("javascript", "beginners-guide", "01-introduction"),
                doc("javascript", "beginners-guide", "02-variables-and-types"),
            ),
        )
        javascript = Node(path=("javascript",), children=(guide, doc("javascript", "closures")))
        return Node(path=(), children=(doc("intro"), javascript))

    def test_child_keys(self, tree: Node) -> None:
        assert tree.child_keys() == ["intro", "javascript"]

    def test_child_lookup(self, tree: Node) -> None:
        assert tree.child("javascript") is tree.children[1]
        assert tree.child("missing") is None

    def test_find_nested(self, tree: Node) -> None:
        node = tree.find(["javascript", "beginners-guide"])
        assert node is not None
        assert node.child_keys() == ["01-introduction", "02-variables-and-types"]

    def test_find_empty_path_is_self(self, tree: Node) -> None:
        assert tree.find(()) is tree

    def test_find_missing(self, tree: Node) -> None:
        assert tree.find(["javascript", "nope", "deeper"]) is None

    def test_walk_is_preorder(self, tree: Node) -> None:
        paths = [node.joined_path for node in tree.walk()]
        assert paths == [
            ".",
            "intro",
            "javascript",
            "javascript/beginners-guide",
            "javascript/beginners-guide/01-introduction",
            "javascript/beginners-guide/02-variables-and-types",
            "javascript/closures",
        ]

    def test_with_children_returns_copy(self, tree: Node) -> None:
        reordered = tree.with_children(reversed(tree.children))
        assert reordered.child_keys() == ["javascript", "intro"]
        assert tree.child_keys() == ["intro", "javascript"]
        assert reordered.path == tree.path

    def test_dict_round_trip(self, tree: Node) -> None:
        data = tree.to_dict()
        assert data["key"] == "."
        assert data["children"][0] == {"key": "intro", "kind": "document"}
        assert Node.from_dict(data) == tree

    def test_from_dict_unknown_kind(self) -> None:
        with pytest.raises(StructuralError, match="Unknown node kind"):
            Node.from_dict({"children": [{"key": "a", "kind": "folder"}]})

    def test_from_dict_missing_key(self) -> None:
        with pytest.raises(StructuralError):
            Node.from_dict({"children": [{"kind": "document"}]})

    def test_from_dict_non_dict_child(self) -> None:
        with pytest.raises(StructuralError, match="must be a dict, got str"):
            Node.from_dict({"children": ["intro"]})

    def test_from_dict_non_dict_root(self) -> None:
        with pytest.raises(StructuralError, match="must be a dict, got list"):
            Node.from_dict(["intro"])  # type: ignore[arg-type]

    def test_from_dict_children_not_a_list(self) -> None:
        with pytest.raises(StructuralError, match="children must be a list"):
            Node.from_dict({"children": "intro"})


class TestDeepTrees:
    """Trees deeper than the interpreter recursion limit."""

    DEPTH = sys.getrecursionlimit() + 500

    @pytest.fixture
    def chain(self) -> Node:
        # Built leaf first so construction itself never nests calls.
        path = tuple(f"c{i}" for i in range(self.DEPTH))
        node = doc(*path)
        for level in range(self.DEPTH - 1, -1, -1):
            node = Node(path=path[:level], children=(node,))
        return node

    def test_walk_reaches_leaf(self, chain: Node) -> None:
        nodes = list(chain.walk())
        assert len(nodes) == self.DEPTH + 1
        assert len(nodes[-1].path) == self.DEPTH

    def test_dict_round_trip(self, chain: Node) -> None:
        rebuilt = Node.from_dict(chain.to_dict())
        assert sum(1 for _ in rebuilt.walk()) == self.DEPTH + 1
        leaf = rebuilt.find(f"c{i}" for i in range(self.DEPTH))
        assert leaf is not None
        assert leaf.kind == NodeKind.DOCUMENT
