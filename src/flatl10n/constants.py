"""Shared constants for flatl10n.

Centralized so that the core, runtime and diagnostics packages agree on the
characters used to build flat keys without importing each other.

Constants are grouped by domain:
- Key characters: structural separator and its escape replacement
- Defaults: values used when the caller supplies none
- Limits: bounds for alias chain following

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Key characters
    "FLATTEN_SEPARATOR",
    "SEPARATOR_ESCAPE_CHAR",
    # Defaults
    "DEFAULT_SEPARATOR",
    # Limits
    "MAX_ALIAS_DEPTH",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# KEY CHARACTERS
# ============================================================================

# Joins ancestor key segments into one composite key: {"a": {"b": 1}} -> "a.b"
FLATTEN_SEPARATOR: str = "."

# Replaces literal FLATTEN_SEPARATOR characters inside a single key segment.
# SOH (U+0001) never appears in hand-written translation keys.
SEPARATOR_ESCAPE_CHAR: str = "\x01"

# ============================================================================
# DEFAULTS
# ============================================================================

# Separator assumed for lookup keys when neither the call nor the
# configuration names one.
DEFAULT_SEPARATOR: str = FLATTEN_SEPARATOR

# ============================================================================
# LIMITS
# ============================================================================

# Maximum number of alias hops followed by FlatBackend.lookup().
# Legitimate alias chains are one or two hops long.
MAX_ALIAS_DEPTH: int = 100

# Maximum cached canonical locale codes.
MAX_LOCALE_CACHE_SIZE: int = 128
