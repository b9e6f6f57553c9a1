"""Tests for path joining, splitting, and normalisation."""

from __future__ import annotations

import pytest

from sidebar_order.tree.paths import ROOT_KEY, join_path, normalize_path, split_path


class TestJoinPath:
    def test_root_is_dot(self) -> None:
        assert join_path(()) == ROOT_KEY == "."

    def test_single_segment(self) -> None:
        assert join_path(["javascript"]) == "javascript"

    def test_nested(self) -> None:
        assert join_path(("javascript", "beginners-guide")) == "javascript/beginners-guide"

    @pytest.mark.parametrize("segments", [("a", ""), ("a/b",), ("..",), (".", "a")])
    def test_malformed(self, segments: tuple[str, ...]) -> None:
        with pytest.raises(ValueError, match="Malformed path"):
            join_path(segments)


class TestSplitPath:
    @pytest.mark.parametrize("text", [".", ""])
    def test_root_aliases(self, text: str) -> None:
        assert split_path(text) == ()

    def test_nested(self) -> None:
        assert split_path("aem/components") == ("aem", "components")

    @pytest.mark.parametrize("text", ["a//b", "/a", "a/", "a/../b", "./a"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ValueError, match="Malformed path"):
            split_path(text)


class TestNormalizePath:
    def test_empty_string_becomes_dot(self) -> None:
        assert normalize_path("") == "."

    def test_regular_path_unchanged(self) -> None:
        assert normalize_path("design-patterns/creational") == "design-patterns/creational"
