"""KeyFlattener - flattening and key normalization sharing one link table.

Flattening a locale's tree seeds the link table with every alias it finds;
normalizing a lookup key consults the same table and memoizes new prefix
resolutions into it. Keeping both operations on one object keeps the table
scoped to the instance instead of process-global state.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from flatl10n.constants import DEFAULT_SEPARATOR
from flatl10n.core.keys import flatten_keys, normalize_segments, validate_separator
from flatl10n.core.links import LinkTable
from flatl10n.locale_utils import canonical_locale, normalize_locale, validate_locale_code
from flatl10n.types import AliasRef

if TYPE_CHECKING:
    from flatl10n.types import FlatKey, FlatMapping, TranslationTree

__all__ = ["KeyFlattener"]

logger = logging.getLogger(__name__)


class KeyFlattener:
    """Flattens translation trees and normalizes lookup keys for them.

    Examples:
        >>> flattener = KeyFlattener()
        >>> flattener.flatten_translations("en", {"a": {"b": "c"}})
        {'a.b': 'c'}
        >>> flattener.flatten_translations("en", {"a": {"b": "c"}}, subtree=True)
        {'a': {'b': 'c'}, 'a.b': 'c'}
        >>>
        >>> tree = {"errors": {"not_found": AliasRef("errors.404")}}
        >>> _ = flattener.flatten_translations("en", tree)
        >>> flattener.normalize_keys("en", "not_found.title", scope="errors")
        'errors.404.title'
        >>> flattener.normalize_keys("en", "b", scope=["x", "a"], separator="/")
        'x.a.b'

    Thread Safety:
        Not synchronized; see LinkTable.
    """

    __slots__ = ("_canonicalize_locales", "_default_separator", "_links")

    def __init__(
        self,
        *,
        default_separator: str = DEFAULT_SEPARATOR,
        links: LinkTable | None = None,
        canonicalize_locales: bool = True,
    ) -> None:
        """Initialize flattener.

        Args:
            default_separator: Separator assumed by normalize_keys() when the
                call passes none (default: ".")
            links: Link table to share (default: a new empty table)
            canonicalize_locales: Key the link table by Babel's canonical
                locale spelling so "en-US" and "en_us" share aliases
                (default: True). When False, only "-" is mapped to "_".

        Raises:
            ValueError: If default_separator is not a single character
        """
        self._default_separator = validate_separator(default_separator)
        self._links = links if links is not None else LinkTable()
        self._canonicalize_locales = canonicalize_locales

    @property
    def links(self) -> LinkTable:
        """Link table shared by flattening and normalization (read-only)."""
        return self._links

    @property
    def default_separator(self) -> str:
        """Separator used when normalize_keys() receives none (read-only)."""
        return self._default_separator

    def locale_key(self, locale: str) -> str:
        """Return the link table key for a caller-supplied locale code.

        Raises:
            ValueError: If locale code is empty or has invalid format
        """
        if self._canonicalize_locales:
            return canonical_locale(locale)
        validate_locale_code(locale)
        return normalize_locale(locale)

    def flatten_translations(
        self,
        locale: str,
        tree: TranslationTree,
        subtree: bool = False,
    ) -> FlatMapping:
        """Flatten one locale's translation tree.

        Leaves are always included. Subtrees are included only when subtree
        is True, each recorded before its children. Every AliasRef leaf is
        also stored in the link table under its flat key.

        Args:
            locale: Locale the tree belongs to
            tree: Nested mapping of translations
            subtree: Keep intermediate mappings as entries (default: False)

        Returns:
            Flat mapping of composite keys to values

        Raises:
            TypeError: If tree is not a Mapping
            ValueError: If locale code is empty or has invalid format
        """
        locale_key = self.locale_key(locale)
        flat: FlatMapping = {}
        alias_count = 0

        for key, value in flatten_keys(tree):
            if isinstance(value, Mapping):
                if subtree:
                    flat[key] = value
                continue
            if isinstance(value, AliasRef):
                self._links.store(locale_key, key, value)
                alias_count += 1
            flat[key] = value

        logger.debug(
            "Flattened %d entries for locale %s (%d aliases, subtree=%s)",
            len(flat),
            locale_key,
            alias_count,
            subtree,
        )
        return flat

    def normalize_keys(
        self,
        locale: str,
        key: object,
        scope: object = None,
        separator: str | None = None,
    ) -> FlatKey:
        """Turn a lookup request into the canonical flat key.

        Scope segments come first, then key segments; None and empty parts
        are dropped. When separator is not ".", literal dots in the input are
        treated as part of key names and separator characters as structure.
        The joined key is then resolved through the locale's aliases.

        Args:
            locale: Locale whose aliases apply
            key: Lookup key (string or list of segments)
            scope: Namespace segments prepended to key (string or list)
            separator: One-character separator used in key and scope
                (default: this flattener's default_separator)

        Returns:
            Flat key ready for a FlatMapping lookup

        Raises:
            ValueError: If separator is not a single character, or locale
                code is empty or has invalid format
        """
        if separator is None:
            separator = self._default_separator
        flat_key = normalize_segments(key, scope, separator)
        resolved = self._links.resolve(self.locale_key(locale), flat_key)
        return flat_key if resolved is None else resolved

    def __repr__(self) -> str:
        return (
            f"KeyFlattener(default_separator={self._default_separator!r}, "
            f"links={self._links!r})"
        )
