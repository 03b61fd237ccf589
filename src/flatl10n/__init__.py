"""flatl10n - flat translation keys with alias resolution.

Flattens nested translation trees into single-level mappings keyed by dotted
composite keys, and resolves aliases that let one key stand in for another.
Lookups against the flattened form are a single dict access.

Public API:
    KeyFlattener - Flatten trees and normalize lookup keys (shared link table)
    LinkTable - Per-locale alias table with memoized prefix resolution
    FlatBackend - Flat translation store with alias-following lookups
    FlattenConfig - Backend configuration (default separator, subtree mode, locking)
    AliasRef - Leaf value marking an alias to another key
    flatten_keys - Depth-first (flat key, value) iterator over a tree
    escape_separator - Escape "." inside a single key segment

Exceptions:
    FlattenError - Base exception class
    AliasResolutionError - Alias chain could not be followed
    CyclicAliasError - Alias chain loops
    AliasDepthExceededError - Alias chain too long

Constants:
    FLATTEN_SEPARATOR - "." joining key segments
    SEPARATOR_ESCAPE_CHAR - Replacement for "." inside a segment
"""

from .constants import FLATTEN_SEPARATOR, SEPARATOR_ESCAPE_CHAR
from .core import KeyFlattener, LinkTable, escape_separator, flatten_keys
from .diagnostics import (
    AliasDepthExceededError,
    AliasResolutionError,
    CyclicAliasError,
    FlattenError,
)
from .runtime import FlatBackend, FlattenConfig
from .types import AliasRef

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("flatl10n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FLATTEN_SEPARATOR",
    "SEPARATOR_ESCAPE_CHAR",
    "AliasDepthExceededError",
    "AliasRef",
    "AliasResolutionError",
    "CyclicAliasError",
    "FlatBackend",
    "FlattenConfig",
    "FlattenError",
    "KeyFlattener",
    "LinkTable",
    "__version__",
    "escape_separator",
    "flatten_keys",
]
