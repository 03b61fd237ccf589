"""Tests for flat key construction: escaping, traversal, normalization.

Tests verify:
- Segment escaping of the flattening separator
- Pre-order traversal order and subtree yielding
- Deep trees without recursion errors
- Scope/key segment collection
- Separator translation for custom lookup separators
"""

import sys
from collections import OrderedDict
from types import MappingProxyType

import pytest

from flatl10n.constants import FLATTEN_SEPARATOR, SEPARATOR_ESCAPE_CHAR
from flatl10n.core.keys import (
    collect_segments,
    escape_separator,
    flatten_keys,
    join_segments,
    normalize_segments,
    validate_separator,
)
from flatl10n.types import AliasRef

ESC = SEPARATOR_ESCAPE_CHAR


class TestEscapeSeparator:
    """Test escape_separator()."""

    def test_plain_segment_unchanged(self) -> None:
        """Segments without dots pass through."""
        assert escape_separator("greeting") == "greeting"

    def test_every_dot_escaped(self) -> None:
        """Each dot becomes the escape character."""
        assert escape_separator("a.b.c") == f"a{ESC}b{ESC}c"

    def test_non_string_segments_converted(self) -> None:
        """Integer and float keys are converted with str()."""
        assert escape_separator(404) == "404"
        assert escape_separator(1.5) == f"1{ESC}5"

    def test_escape_char_is_not_separator(self) -> None:
        """Escaped segments contain no structural separator."""
        assert FLATTEN_SEPARATOR not in escape_separator("x.y.z")


class TestFlattenKeys:
    """Test flatten_keys() traversal."""

    def test_empty_tree(self) -> None:
        """Empty tree yields nothing."""
        assert list(flatten_keys({})) == []

    def test_preorder_with_subtrees(self) -> None:
        """Subtrees are yielded before their children, children before siblings."""
        tree = {"a": {"b": {"c": "d", "e": "f"}, "g": "h"}, "i": "j"}

        assert list(flatten_keys(tree)) == [
            ("a", tree["a"]),
            ("a.b", tree["a"]["b"]),
            ("a.b.c", "d"),
            ("a.b.e", "f"),
            ("a.g", "h"),
            ("i", "j"),
        ]

    def test_dotted_segment_escaped_in_flat_key(self) -> None:
        """A dotted segment stays one level deep."""
        keys = [key for key, _ in flatten_keys({"x": {"a.b": "v"}})]

        assert keys == ["x", f"x.a{ESC}b"]

    def test_dotted_segment_distinct_from_nesting(self) -> None:
        """{"x": {"a.b": v}} and {"x": {"a": {"b": v}}} produce different leaf keys."""
        escaped = dict(flatten_keys({"x": {"a.b": "v"}}))
        nested = dict(flatten_keys({"x": {"a": {"b": "v"}}}))

        assert f"x.a{ESC}b" in escaped
        assert "x.a.b" not in escaped
        assert "x.a.b" in nested

    def test_alias_values_are_leaves(self) -> None:
        """AliasRef values are yielded as-is and not descended into."""
        ref = AliasRef("b")
        assert list(flatten_keys({"a": ref})) == [("a", ref)]

    def test_none_leaf_yielded(self) -> None:
        """None is an ordinary leaf value."""
        assert list(flatten_keys({"a": None, "b": "c"})) == [("a", None), ("b", "c")]

    def test_empty_subtree_yielded_without_children(self) -> None:
        """Empty nested mappings are yielded once."""
        assert list(flatten_keys({"a": {}})) == [("a", {})]

    def test_non_dict_mappings_accepted(self) -> None:
        """Any Mapping works at any level, in its own iteration order."""
        tree = OrderedDict([("z", MappingProxyType({"y": 1})), ("a", 2)])

        assert [key for key, _ in flatten_keys(tree)] == ["z", "z.y", "a"]

    def test_deep_tree_exceeds_recursion_limit(self) -> None:
        """Traversal is iterative; depth beyond the recursion limit works."""
        depth = sys.getrecursionlimit() * 2
        tree: dict[str, object] = {"leaf": "bottom"}
        for _ in range(depth):
            tree = {"n": tree}

        *_, (last_key, last_value) = flatten_keys(tree)

        assert last_value == "bottom"
        assert last_key.count(FLATTEN_SEPARATOR) == depth

    def test_lazy_iteration(self) -> None:
        """flatten_keys returns an iterator; nothing is walked until consumed."""
        iterator = flatten_keys({"a": "b"})
        assert next(iterator) == ("a", "b")
        with pytest.raises(StopIteration):
            next(iterator)

    @pytest.mark.parametrize("tree", [None, "a.b", ["a", "b"], 42])
    def test_non_mapping_rejected(self, tree: object) -> None:
        """Non-mapping trees fail fast with TypeError."""
        with pytest.raises(TypeError, match="Translation tree must be a Mapping"):
            list(flatten_keys(tree))  # type: ignore[arg-type]


class TestCollectSegments:
    """Test collect_segments()."""

    def test_scope_then_key(self) -> None:
        """Scope parts precede key parts."""
        assert collect_segments(["x", "y"], "z") == ["x", "y", "z"]

    def test_none_and_empty_dropped(self) -> None:
        """None and empty strings are discarded."""
        assert collect_segments([None, "", "x"], None, "", "y") == ["x", "y"]

    def test_nested_sequences_flattened(self) -> None:
        """Nested lists and tuples are expanded in order."""
        assert collect_segments(["a", ("b", ["c"])], ["d"]) == ["a", "b", "c", "d"]

    def test_strings_not_split(self) -> None:
        """A string is one part even if it contains dots."""
        assert collect_segments("a.b") == ["a.b"]

    def test_non_strings_converted(self) -> None:
        """Non-string parts are converted with str()."""
        assert collect_segments(["errors", 404]) == ["errors", "404"]


class TestJoinSegments:
    """Test join_segments() separator translation."""

    def test_default_separator_joins_verbatim(self) -> None:
        """With '.', segments are joined unchanged."""
        assert join_segments(["a.b", "c"], ".") == "a.b.c"

    def test_custom_separator_becomes_structure(self) -> None:
        """Custom separator characters become '.'."""
        assert join_segments(["a/b", "c"], "/") == "a.b.c"

    def test_custom_separator_escapes_literal_dots(self) -> None:
        """Literal dots become the escape character under a custom separator."""
        assert join_segments(["v1.2/notes"], "/") == f"v1{ESC}2.notes"

    def test_translation_is_simultaneous(self) -> None:
        """Dots produced from the separator are not re-escaped."""
        assert join_segments(["a/b.c"], "/") == f"a.b{ESC}c"


class TestNormalizeSegments:
    """Test normalize_segments()."""

    def test_custom_separator_matches_default(self) -> None:
        """'a/b' with '/' and 'a.b' with '.' yield the same flat key."""
        assert normalize_segments("a/b", ["x"], "/") == normalize_segments("a.b", ["x"], ".")

    def test_empty_scope_and_key(self) -> None:
        """Empty scope and empty key give an empty flat key."""
        assert normalize_segments("", []) == ""
        assert normalize_segments(None, None) == ""

    def test_scope_string(self) -> None:
        """Scope may be a single string."""
        assert normalize_segments("title", "errors") == "errors.title"

    def test_key_list(self) -> None:
        """Key may be a list of segments."""
        assert normalize_segments(["a", "b"], None) == "a.b"

    def test_matches_flattened_key_for_dotted_segment(self) -> None:
        """A custom-separator lookup finds a key flattened from a dotted segment."""
        flat = dict(flatten_keys({"x": {"a.b": "v"}}))

        assert flat[normalize_segments("x/a.b", None, "/")] == "v"

    @pytest.mark.parametrize("separator", ["", "::", None, 1])
    def test_invalid_separator_rejected(self, separator: object) -> None:
        """Separators must be exactly one character."""
        with pytest.raises(ValueError, match="single character"):
            normalize_segments("a", None, separator)  # type: ignore[arg-type]


class TestValidateSeparator:
    """Test validate_separator()."""

    def test_returns_valid_separator(self) -> None:
        """Valid separators are returned unchanged."""
        assert validate_separator("|") == "|"
