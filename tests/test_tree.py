"""Tests for tree/types.py and tree/parsing.py.

Covers Section construction rules, order-sensitive equality, key lookup,
JSON-shaped parsing (including opaque array leaves and malformed input),
and serialization back to nested dicts.

Python 3.13+.
"""

from __future__ import annotations

import json
from typing import Any

import pytest
from hypothesis import given

from tests.strategies.trees import translation_documents
from transtree.diagnostics import MalformedTreeError, TreeDepthExceededError
from transtree.tree import (
    Leaf,
    Section,
    join_path,
    leaf_text,
    parse_tree,
    split_path,
    to_plain,
)


class TestSection:
    """Section construction and lookup."""

    def test_lookup_by_key(self) -> None:
        section = Section.of({"title": Leaf("Categories")})

        assert section.get("title") == Leaf("Categories")
        assert section.get("missing") is None
        assert "title" in section
        assert len(section) == 1

    def test_keys_preserve_insertion_order(self) -> None:
        section = Section.of([("b", Leaf("2")), ("a", Leaf("1")), ("c", Leaf("3"))])

        assert section.keys() == ("b", "a", "c")
        assert list(section) == ["b", "a", "c"]

    def test_equality_is_order_sensitive(self) -> None:
        first = Section.of([("a", Leaf("1")), ("b", Leaf("2"))])
        second = Section.of([("b", Leaf("2")), ("a", Leaf("1"))])

        assert first != second
        assert first == Section.of([("a", Leaf("1")), ("b", Leaf("2"))])

    def test_sections_are_hashable(self) -> None:
        section = Section.of({"a": Section.of({"b": Leaf("x")})})

        assert hash(section) == hash(Section.of({"a": Section.of({"b": Leaf("x")})}))

    def test_duplicate_keys_rejected(self) -> None:
        with pytest.raises(MalformedTreeError, match="Duplicate key 'a'"):
            Section((("a", Leaf("1")), ("a", Leaf("2"))))

    def test_separator_in_key_rejected(self) -> None:
        with pytest.raises(MalformedTreeError, match="path separator") as exc_info:
            Section((("a.b", Leaf("1")),))

        assert exc_info.value.path == "a.b"

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(MalformedTreeError, match="must not be empty"):
            Section((("", Leaf("root")),))

    def test_non_node_child_rejected(self) -> None:
        with pytest.raises(MalformedTreeError, match="must be a Leaf or Section"):
            Section((("a", "plain string"),))  # type: ignore[arg-type]

    def test_find_walks_nested_sections(self) -> None:
        tree = Section.of({"nav": Section.of({"home": Leaf("Home")})})

        assert tree.find(("nav", "home")) == Leaf("Home")
        assert tree.find(("nav",)) == Section.of({"home": Leaf("Home")})
        assert tree.find(()) is tree

    def test_find_through_leaf_returns_none(self) -> None:
        tree = Section.of({"nav": Leaf("Navigation")})

        assert tree.find(("nav", "home")) is None
        assert tree.find(("other",)) is None


class TestPaths:
    def test_join_at_root(self) -> None:
        assert join_path("", "nav") == "nav"

    def test_join_nested(self) -> None:
        assert join_path("categories.actions", "create") == "categories.actions.create"

    def test_split(self) -> None:
        assert split_path("categories.actions.create") == ("categories", "actions", "create")


class TestLeafText:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Hello", "Hello"),
            (None, ""),
            (True, "true"),
            (3, "3"),
            (1.5, "1.5"),
            (["a", "b"], '["a","b"]'),
            (["Привет"], '["Привет"]'),
        ],
    )
    def test_rendering(self, value: Any, expected: str) -> None:
        assert leaf_text(value) == expected


class TestParseTree:
    """parse_tree() behaviour."""

    def test_nested_document(self) -> None:
        tree = parse_tree({"categories": {"title": "Categories"}, "ok": "OK"})

        assert tree == Section.of(
            {
                "categories": Section.of({"title": Leaf("Categories")}),
                "ok": Leaf("OK"),
            }
        )

    def test_arrays_are_opaque_leaves(self) -> None:
        tree = parse_tree({"days": ["Mon", "Tue"]})

        assert tree.get("days") == Leaf('["Mon","Tue"]')

    def test_empty_sections_kept(self) -> None:
        tree = parse_tree({"empty": {}})

        assert tree.get("empty") == Section()

    def test_root_must_be_object(self) -> None:
        with pytest.raises(MalformedTreeError, match="root must be an object"):
            parse_tree(["not", "an", "object"])

    def test_non_string_keys_rejected(self) -> None:
        with pytest.raises(MalformedTreeError, match="Keys must be strings"):
            parse_tree({"nav": {1: "one"}})

    def test_dotted_key_rejected(self) -> None:
        with pytest.raises(MalformedTreeError, match="path separator"):
            parse_tree({"nav.home": "Home"})

    def test_empty_key_holding_section_rejected(self) -> None:
        """An empty key would give its children the same paths as root keys."""
        with pytest.raises(MalformedTreeError, match="must not be empty"):
            parse_tree({"": {"a": "nested"}, "a": "top"})

    def test_cycle_rejected(self) -> None:
        document: dict[str, Any] = {"a": {}}
        document["a"]["loop"] = document

        with pytest.raises(MalformedTreeError, match="Cyclic reference") as exc_info:
            parse_tree(document)

        assert exc_info.value.path == "a.loop"

    def test_shared_subtree_is_not_a_cycle(self) -> None:
        shared = {"label": "Shared"}
        tree = parse_tree({"first": shared, "second": shared})

        assert tree.get("first") == tree.get("second")

    def test_depth_limit(self) -> None:
        document: dict[str, Any] = {}
        node = document
        for _ in range(20):
            node["child"] = {}
            node = node["child"]

        with pytest.raises(TreeDepthExceededError):
            parse_tree(document, max_depth=10)

    def test_depth_error_is_malformed_tree_error(self) -> None:
        assert issubclass(TreeDepthExceededError, MalformedTreeError)


class TestToPlain:
    def test_inverse_of_parse(self) -> None:
        document = {"nav": {"home": "Home", "deep": {"x": ""}}, "title": "T"}

        assert to_plain(parse_tree(document)) == document

    def test_preserves_key_order(self) -> None:
        plain = to_plain(parse_tree({"z": "1", "a": "2"}))

        assert list(plain) == ["z", "a"]

    def test_json_encodable(self) -> None:
        plain = to_plain(parse_tree({"title": "Categorías"}))

        assert json.loads(json.dumps(plain)) == {"title": "Categorías"}

    @given(translation_documents())
    def test_plain_documents_survive(self, document: dict[str, Any]) -> None:
        plain = to_plain(parse_tree(document))

        assert plain == document
        assert json.dumps(plain) == json.dumps(document)
