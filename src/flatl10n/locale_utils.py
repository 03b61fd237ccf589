"""Locale code handling for link table keys.

Callers spell the same locale many ways ("en-US", "en_US", "en_us"). The link
table and the backend key their per-locale state by one canonical spelling so
aliases discovered under one spelling resolve under every other.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import functools
import logging

from flatl10n.constants import MAX_LOCALE_CACHE_SIZE
from flatl10n.diagnostics import ErrorTemplate

__all__ = [
    "canonical_locale",
    "normalize_locale",
    "validate_locale_code",
]

logger = logging.getLogger(__name__)


def validate_locale_code(locale_code: str) -> None:
    """Validate locale code format.

    Checks that the code is a non-empty string of alphanumeric characters
    with optional underscore or hyphen separators.

    Args:
        locale_code: Locale code to validate

    Raises:
        TypeError: If locale_code is not a string
        ValueError: If locale code is empty or has invalid format
    """
    if not isinstance(locale_code, str):
        msg = f"Locale code must be str, got {type(locale_code).__name__}"
        raise TypeError(msg)

    if not locale_code:
        raise ValueError(ErrorTemplate.empty_locale())

    if not locale_code.replace("_", "").replace("-", "").isalnum():
        raise ValueError(ErrorTemplate.invalid_locale(locale_code))


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def canonical_locale(locale_code: str) -> str:
    """Return the canonical spelling of a locale code.

    Parses the code with Babel so that case and separator variants collapse
    to one identifier. Codes Babel does not know (private or made-up locales)
    fall back to normalize_locale() so they still work as table keys.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Canonical POSIX locale identifier

    Raises:
        ValueError: If locale code is empty or has invalid format

    Example:
        >>> canonical_locale("en-us")
        'en_US'
        >>> canonical_locale("zz-private")
        'zz_private'
    """
    validate_locale_code(locale_code)

    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    try:
        return str(Locale.parse(normalized))
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Unknown locale '%s': %s. Using '%s' as table key", locale_code, e, normalized
        )
        return normalized
