"""FlatBackend - flat translation store with alias-aware lookups.

Holds one flat mapping per locale, built by KeyFlattener from nested trees,
and answers lookups with one dict access after key normalization. Aliases
stored in the trees are followed until a non-alias value is reached.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from types import MappingProxyType
from typing import TYPE_CHECKING

from flatl10n.core.flattener import KeyFlattener
from flatl10n.core.keys import normalize_segments
from flatl10n.diagnostics import AliasDepthExceededError, CyclicAliasError, ErrorTemplate
from flatl10n.runtime.config import FlattenConfig
from flatl10n.runtime.rwlock import RWLock
from flatl10n.types import AliasRef

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from contextlib import AbstractContextManager

    from flatl10n.core.links import LinkTable
    from flatl10n.types import FlatKey, FlatMapping, TranslationTree, TranslationValue

__all__ = ["FlatBackend"]

logger = logging.getLogger(__name__)

# Returned by the read-only resolver when a prefix match must be memoized,
# which needs the write lock.
_NEEDS_SCAN = object()


class FlatBackend:
    """Translation store answering lookups from pre-flattened mappings.

    Thread Safety:
        By default the backend is NOT thread-safe: complete all
        store_translations() calls before sharing it across threads, and
        serialize lookups, since they memoize alias resolutions.

        With FlattenConfig(thread_safe=True), a readers-writer lock guards
        all state. Lookups and normalize_keys() run under the shared read
        lock, prefix scans included. Only a key that first resolves through
        an alias prefix (and so must be memoized), stores and resets take
        the exclusive write lock.

    Examples:
        >>> backend = FlatBackend()
        >>> backend.store_translations("en", {
        ...     "errors": {
        ...         "404": {"title": "Not found"},
        ...         "not_found": AliasRef("errors.404"),
        ...     },
        ... })
        2
        >>> backend.lookup("en", "errors.not_found.title")
        'Not found'
        >>> backend.lookup("en", "title", scope=["errors", "404"])
        'Not found'
        >>> backend.lookup("en", "errors/404/title", separator="/")
        'Not found'
    """

    __slots__ = ("_config", "_flattener", "_lock", "_translations")

    def __init__(self, config: FlattenConfig | None = None) -> None:
        """Initialize an empty backend.

        Args:
            config: Backend configuration (default: FlattenConfig())
        """
        self._config = config if config is not None else FlattenConfig()
        self._flattener = KeyFlattener(
            default_separator=self._config.default_separator,
            canonicalize_locales=self._config.canonicalize_locales,
        )
        self._translations: dict[str, FlatMapping] = {}
        self._lock: RWLock | None = RWLock() if self._config.thread_safe else None

        logger.info(
            "FlatBackend initialized (separator=%r, subtree=%s, thread_safe=%s)",
            self._config.default_separator,
            self._config.subtree,
            self._config.thread_safe,
        )

    @property
    def config(self) -> FlattenConfig:
        """Backend configuration (read-only)."""
        return self._config

    @property
    def flattener(self) -> KeyFlattener:
        """Flattener owning the link table (read-only)."""
        return self._flattener

    @property
    def links(self) -> LinkTable:
        """Link table shared by stores and lookups (read-only)."""
        return self._flattener.links

    def _reading(self) -> AbstractContextManager[None]:
        return self._lock.read() if self._lock is not None else nullcontext()

    def _writing(self) -> AbstractContextManager[None]:
        return self._lock.write() if self._lock is not None else nullcontext()

    def store_translations(self, locale: str, tree: TranslationTree) -> int:
        """Flatten a tree and merge it into the locale's translations.

        Later stores overwrite entries with the same flat key. Aliases in
        the tree are added to the link table; a key stored as a plain value
        (or subtree) drops any link previously stored under it.

        Args:
            locale: Locale the tree belongs to
            tree: Nested mapping of translations

        Returns:
            Number of flat entries written

        Raises:
            TypeError: If tree is not a Mapping
            ValueError: If locale code is empty or has invalid format
        """
        locale_key = self._flattener.locale_key(locale)
        with self._writing():
            flat = self._flattener.flatten_translations(
                locale, tree, subtree=self._config.subtree
            )
            for key, value in flat.items():
                if not isinstance(value, AliasRef):
                    self.links.discard(locale_key, key)
            self._translations.setdefault(locale_key, {}).update(flat)

        logger.debug("Stored %d translations for locale %s", len(flat), locale_key)
        return len(flat)

    def normalize_keys(
        self,
        locale: str,
        key: object,
        scope: object = None,
        separator: str | None = None,
    ) -> FlatKey:
        """Return the flat key a lookup would read; see KeyFlattener.normalize_keys()."""
        locale_key = self._flattener.locale_key(locale)
        if separator is None:
            separator = self._config.default_separator
        flat_key = normalize_segments(key, scope, separator)

        if self._lock is not None:
            with self._lock.read():
                target = self._resolve_shared(locale_key, flat_key)
            if target is not _NEEDS_SCAN:
                return flat_key if target is None else target  # type: ignore[return-value]

        with self._writing():
            resolved = self.links.resolve(locale_key, flat_key)
        return flat_key if resolved is None else resolved

    def lookup(
        self,
        locale: str,
        key: object,
        scope: object = None,
        separator: str | None = None,
    ) -> TranslationValue | None:
        """Look up a translation, following aliases.

        Args:
            locale: Locale to read
            key: Lookup key (string or list of segments)
            scope: Namespace segments prepended to key
            separator: One-character separator used in key and scope
                (default: config.default_separator)

        Returns:
            The translation (a subtree mapping in subtree mode), or None if
            the key is not stored

        Raises:
            CyclicAliasError: If aliases loop back on themselves
            AliasDepthExceededError: If the alias chain exceeds
                config.max_alias_depth hops
            ValueError: If separator is not a single character, or locale
                code is empty or has invalid format
        """
        locale_key = self._flattener.locale_key(locale)
        if separator is None:
            separator = self._config.default_separator
        flat_key = normalize_segments(key, scope, separator)

        if self._lock is not None:
            with self._lock.read():
                value = self._follow(locale_key, flat_key, self._resolve_shared)
            if value is not _NEEDS_SCAN:
                return value

        with self._writing():
            return self._follow(locale_key, flat_key, self.links.resolve)

    def _resolve_shared(self, locale_key: str, key: str) -> str | object | None:
        """Resolve without writing; signal when a prefix match must be memoized."""
        target = self.links.get(locale_key, key)
        if target is not None:
            return target
        if self.links.peek_prefix(locale_key, key) is not None:
            return _NEEDS_SCAN
        return None

    def _follow(
        self,
        locale_key: str,
        flat_key: str,
        resolve: Callable[[str, str], str | object | None],
    ) -> TranslationValue | object | None:
        """Read flat_key, following alias values until a plain value is found."""
        translations = self._translations.get(locale_key)
        if translations is None:
            logger.debug("No translations stored for locale %s", locale_key)
            return None

        chain = [flat_key]
        seen: set[str] = set()
        key = flat_key

        while True:
            target = resolve(locale_key, key)
            if target is _NEEDS_SCAN:
                return _NEEDS_SCAN
            if target is not None:
                key = target  # type: ignore[assignment]
                chain.append(key)

            if key in seen:
                raise CyclicAliasError(
                    ErrorTemplate.cyclic_alias(locale_key, tuple(chain)),
                    locale_key,
                    tuple(chain),
                )
            seen.add(key)

            value = translations.get(key)
            if not isinstance(value, AliasRef):
                if value is None:
                    logger.debug("Key %r not found in locale %s", key, locale_key)
                return value

            if len(seen) >= self._config.max_alias_depth:
                raise AliasDepthExceededError(
                    ErrorTemplate.alias_depth_exceeded(
                        locale_key, key, self._config.max_alias_depth
                    ),
                    locale_key,
                    tuple(chain),
                )
            key = value.target
            chain.append(key)

    def translations(self, locale: str) -> Mapping[str, TranslationValue]:
        """Read-only view of one locale's flat translations (empty if none)."""
        locale_key = self._flattener.locale_key(locale)
        with self._reading():
            return MappingProxyType(self._translations.get(locale_key, {}))

    def available_locales(self) -> tuple[str, ...]:
        """Locales with stored translations, in first-store order."""
        with self._reading():
            return tuple(self._translations)

    def reset(self, locale: str | None = None) -> None:
        """Drop translations and links for one locale, or for all locales.

        Args:
            locale: Locale to drop (default: None, drop everything)
        """
        locale_key = None if locale is None else self._flattener.locale_key(locale)
        with self._writing():
            if locale_key is None:
                self._translations.clear()
            else:
                self._translations.pop(locale_key, None)
            self.links.clear(locale_key)

        logger.debug("Reset backend state for %s", locale_key or "all locales")

    def __enter__(self) -> FlatBackend:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        logger.debug("FlatBackend context exited")

    def __contains__(self, locale: object) -> bool:
        if not isinstance(locale, str):
            return False
        try:
            locale_key = self._flattener.locale_key(locale)
        except ValueError:
            return False
        return locale_key in self._translations

    def __repr__(self) -> str:
        return (
            f"FlatBackend(locales={len(self._translations)}, "
            f"links={len(self.links)}, thread_safe={self._config.thread_safe})"
        )
