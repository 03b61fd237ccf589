"""Flat key construction: segment escaping, tree traversal, key normalization.

Pure functions with no shared state. The link-aware operations built on top
of them live in flatl10n.core.flattener.

Escaping:
    A literal "." inside one key segment would be indistinguishable from the
    structural separator once segments are joined, so it is replaced by
    SEPARATOR_ESCAPE_CHAR first:

        {"x": {"a.b": "v"}}      -> {"x.a\\x01b": "v"}
        {"x": {"a": {"b": "v"}}} -> {"x.a.b": "v"}

    The escape is one-way; nothing in this package restores the original dot.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from flatl10n.constants import FLATTEN_SEPARATOR, SEPARATOR_ESCAPE_CHAR
from flatl10n.diagnostics import ErrorTemplate

if TYPE_CHECKING:
    from flatl10n.types import FlatKey, TranslationTree, TranslationValue

__all__ = [
    "collect_segments",
    "escape_separator",
    "flatten_keys",
    "join_segments",
    "normalize_segments",
    "validate_separator",
]


def escape_separator(segment: object) -> str:
    """Escape the flattening separator inside a single key segment.

    Args:
        segment: Key segment; non-string keys are converted with str()

    Returns:
        Segment with every "." replaced by SEPARATOR_ESCAPE_CHAR

    Example:
        >>> escape_separator("a.b")
        'a\\x01b'
        >>> escape_separator(404)
        '404'
    """
    return str(segment).replace(FLATTEN_SEPARATOR, SEPARATOR_ESCAPE_CHAR)


def flatten_keys(tree: TranslationTree) -> Iterator[tuple[FlatKey, TranslationValue]]:
    """Walk a translation tree depth-first, yielding (flat key, value) pairs.

    Every node is yielded, subtrees included, in pre-order: a subtree is
    yielded before its children and children before the subtree's following
    siblings. Iteration order within a mapping is the mapping's own order.

    Uses an explicit stack of item iterators, so arbitrarily deep trees
    cannot exhaust the interpreter's recursion limit.

    Args:
        tree: Nested mapping of key segments to values

    Yields:
        (flat_key, value) for every leaf and every subtree

    Raises:
        TypeError: If tree is not a Mapping

    Example:
        >>> list(flatten_keys({"a": {"b": "c"}, "d": "e"}))
        [('a', {'b': 'c'}), ('a.b', 'c'), ('d', 'e')]
    """
    if not isinstance(tree, Mapping):
        raise TypeError(ErrorTemplate.invalid_tree(tree))

    # Each frame: (flat key of the mapping being walked, iterator over its items)
    stack: list[tuple[str | None, Iterator[tuple[object, TranslationValue]]]] = [
        (None, iter(tree.items()))
    ]

    while stack:
        parent_key, items = stack[-1]
        item = next(items, None)
        if item is None:
            stack.pop()
            continue

        segment, value = item
        escaped = escape_separator(segment)
        flat_key = escaped if parent_key is None else f"{parent_key}{FLATTEN_SEPARATOR}{escaped}"

        yield flat_key, value

        if isinstance(value, Mapping):
            stack.append((flat_key, iter(value.items())))


def validate_separator(separator: object) -> str:
    """Check that a lookup separator is exactly one character.

    Args:
        separator: Candidate separator

    Returns:
        The separator, unchanged

    Raises:
        ValueError: If separator is not a one-character string
    """
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(ErrorTemplate.invalid_separator(separator))
    return separator


def collect_segments(*parts: object) -> list[str]:
    """Flatten scope/key parts into a list of segment strings.

    Strings are taken whole; lists and tuples are expanded recursively;
    None and empty strings are dropped; anything else is converted with str().

    Example:
        >>> collect_segments(["x", None, ("y",)], "a.b", "")
        ['x', 'y', 'a.b']
    """
    segments: list[str] = []
    pending: list[object] = list(reversed(parts))

    while pending:
        part = pending.pop()
        if part is None:
            continue
        if isinstance(part, (list, tuple)):
            pending.extend(reversed(part))
            continue
        text = str(part)
        if text:
            segments.append(text)

    return segments


def join_segments(segments: list[str], separator: str) -> FlatKey:
    """Join lookup segments into one flat key.

    When the caller's separator differs from FLATTEN_SEPARATOR, each segment
    is translated in a single pass: literal "." becomes SEPARATOR_ESCAPE_CHAR
    (it was part of a key name) and the caller's separator becomes "." (it
    was structure). The result lines up with keys produced by flatten_keys().

    Args:
        segments: Segment strings, already collected
        separator: One-character separator the caller used inside segments

    Returns:
        Segments joined by FLATTEN_SEPARATOR
    """
    if separator != FLATTEN_SEPARATOR:
        table = str.maketrans(
            {FLATTEN_SEPARATOR: SEPARATOR_ESCAPE_CHAR, separator: FLATTEN_SEPARATOR}
        )
        segments = [segment.translate(table) for segment in segments]

    return FLATTEN_SEPARATOR.join(segments)


def normalize_segments(
    key: object,
    scope: object = None,
    separator: str = FLATTEN_SEPARATOR,
) -> FlatKey:
    """Build the flat key for a lookup without consulting any link table.

    Args:
        key: Lookup key (string, list of segments, or None)
        scope: Namespace segments prepended to key (string, list, or None)
        separator: One-character separator used inside key and scope

    Returns:
        Flat key

    Raises:
        ValueError: If separator is not a single character

    Example:
        >>> normalize_segments("a/b", ["x"], "/") == normalize_segments("a.b", ["x"], ".")
        True
        >>> normalize_segments("", [])
        ''
    """
    validate_separator(separator)
    return join_segments(collect_segments(scope, key), separator)
