"""Per-locale link table: alias targets and memoized prefix resolutions.

The table maps locale -> {flat key -> target flat key}. Entries arrive two
ways:

- Flattening stores every AliasRef leaf under its own flat key.
- Resolution memoizes keys that matched a stored entry by prefix, so the
  next lookup of the same key is a single dict hit.

Prefix matching is character-wise and first-match-wins in insertion order.
It is NOT longest-prefix-match: with entries "a" and "a.b" both stored, key
"a.b.c" resolves through whichever was stored first. A stored "errors.not"
also matches "errors.not_found". Callers relying on nested aliases should
store the more specific alias first.

Memoized entries remember the entry they were derived from. Overwriting an
entry with a new target, or discarding it, drops everything derived from it.

Thread Safety:
    Not synchronized. Concurrent writers must be serialized by the caller
    (FlatBackend does this with an RWLock when thread_safe=True).

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

__all__ = ["LinkTable"]

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, str] = MappingProxyType({})


class LinkTable:
    """Alias table keyed by locale, with memoized prefix resolutions.

    Example:
        >>> links = LinkTable()
        >>> links.store("en", "errors.not_found", "errors.404")
        'errors.404'
        >>> links.resolve("en", "errors.not_found.title")
        'errors.404.title'
        >>> links.resolve("en", "greeting") is None
        True

    Attributes:
        exact_hits: Resolutions answered by an exact entry
        prefix_hits: Resolutions answered by a prefix scan (then memoized)
        misses: Resolutions with no applicable entry
        scans: Number of prefix scans performed
    """

    __slots__ = ("_derived", "_exact_hits", "_links", "_misses", "_prefix_hits", "_scans")

    def __init__(self) -> None:
        """Initialize an empty link table."""
        self._links: dict[str, dict[str, str]] = {}
        # locale -> memoized key -> entry it was derived from
        self._derived: dict[str, dict[str, str]] = {}
        self._exact_hits = 0
        self._prefix_hits = 0
        self._misses = 0
        self._scans = 0

    def store(self, locale: str, key: str, target: object) -> str:
        """Store (or overwrite) the target for a flat key.

        The locale's sub-table is created on first write. Changing the target
        of an existing entry drops the resolutions memoized from it.

        Args:
            locale: Locale table key
            key: Flat key
            target: Alias target; converted with str()

        Returns:
            The stored target string
        """
        target_key = str(target)
        table = self._links.get(locale)
        if table is None:
            table = self._links[locale] = {}
        previous = table.get(key)
        table[key] = target_key

        derived = self._derived.get(locale)
        if derived:
            derived.pop(key, None)
            if previous is not None and previous != target_key:
                self._drop_derived(locale, key)

        logger.debug("Stored link [%s] %r -> %r", locale, key, target_key)
        return target_key

    def discard(self, locale: str, key: str) -> bool:
        """Remove the exact entry for key and every resolution memoized from it.

        Args:
            locale: Locale table key
            key: Flat key

        Returns:
            True if an entry was removed
        """
        table = self._links.get(locale)
        if table is None or key not in table:
            return False

        del table[key]
        derived = self._derived.get(locale)
        if derived:
            derived.pop(key, None)
        dropped = self._drop_derived(locale, key)
        if not table:
            del self._links[locale]
            self._derived.pop(locale, None)

        logger.debug("Discarded link [%s] %r (%d derived)", locale, key, dropped)
        return True

    def _drop_derived(self, locale: str, source: str) -> int:
        """Remove memoized entries derived from source."""
        derived = self._derived.get(locale)
        table = self._links.get(locale)
        if not derived or table is None:
            return 0

        # A memoized key always follows its source in scan order, so no
        # memoized entry is itself the source of another.
        stale = [key for key, origin in derived.items() if origin == source]
        for key in stale:
            del derived[key]
            table.pop(key, None)
        return len(stale)

    def get(self, locale: str, key: str) -> str | None:
        """Return the exact entry for key, without prefix scanning."""
        table = self._links.get(locale)
        if table is None:
            return None
        return table.get(key)

    def find_prefix(self, locale: str, key: str) -> tuple[str, str] | None:
        """Find the first stored entry whose key is a literal prefix of key.

        Scans entries in insertion order and stops at the first match.

        Args:
            locale: Locale table key
            key: Flat key being resolved

        Returns:
            (source, target) of the first matching entry, or None
        """
        self._scans += 1
        return self.peek_prefix(locale, key)

    def peek_prefix(self, locale: str, key: str) -> tuple[str, str] | None:
        """Like find_prefix(), but leaves statistics untouched.

        Performs no writes, so concurrent callers only need shared access.
        """
        table = self._links.get(locale)
        if not table:
            return None
        for source, target in table.items():
            if key.startswith(source):
                return source, target
        return None

    def resolve(self, locale: str, key: str) -> str | None:
        """Resolve key through the locale's aliases.

        An exact entry is returned immediately. Otherwise the first entry
        that is a prefix of key is substituted for that prefix (one
        occurrence) and the result is memoized under key.

        Args:
            locale: Locale table key
            key: Flat key to resolve

        Returns:
            Target flat key, or None when no alias applies
        """
        target = self.get(locale, key)
        if target is not None:
            self._exact_hits += 1
            return target

        link = self.find_prefix(locale, key)
        if link is None:
            self._misses += 1
            return None

        self._prefix_hits += 1
        source, target = link
        resolved = self.store(locale, key, key.replace(source, target, 1))
        self._derived.setdefault(locale, {})[key] = source
        logger.debug("Resolved [%s] %r via prefix %r -> %r", locale, key, source, resolved)
        return resolved

    def links_for(self, locale: str) -> Mapping[str, str]:
        """Read-only view of one locale's entries (empty if none stored)."""
        table = self._links.get(locale)
        if table is None:
            return _EMPTY
        return MappingProxyType(table)

    def locales(self) -> tuple[str, ...]:
        """Locales with at least one stored entry, in first-write order."""
        return tuple(self._links)

    def clear(self, locale: str | None = None) -> None:
        """Drop one locale's entries, or every entry when locale is None.

        Statistics are kept; they describe the table's lifetime.
        """
        if locale is None:
            self._links.clear()
            self._derived.clear()
        else:
            self._links.pop(locale, None)
            self._derived.pop(locale, None)

    def get_stats(self) -> dict[str, int]:
        """Get link table statistics.

        Returns:
            Dict with keys:
            - locales (int): Number of locales with entries
            - links (int): Total stored entries across locales
            - exact_hits (int): Resolutions answered by an exact entry
            - prefix_hits (int): Resolutions answered by a prefix scan
            - misses (int): Resolutions with no applicable entry
            - scans (int): Prefix scans performed
        """
        return {
            "locales": len(self._links),
            "links": len(self),
            "exact_hits": self._exact_hits,
            "prefix_hits": self._prefix_hits,
            "misses": self._misses,
            "scans": self._scans,
        }

    @property
    def exact_hits(self) -> int:
        return self._exact_hits

    @property
    def prefix_hits(self) -> int:
        return self._prefix_hits

    @property
    def misses(self) -> int:
        return self._misses

    @property
    def scans(self) -> int:
        return self._scans

    def __contains__(self, locale: object) -> bool:
        return locale in self._links

    def __len__(self) -> int:
        return sum(len(table) for table in self._links.values())

    def __repr__(self) -> str:
        return f"LinkTable(locales={len(self._links)}, links={len(self)})"
