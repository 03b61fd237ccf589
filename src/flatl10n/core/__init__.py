"""Flattening core: key construction, link table, and the flattener.

Dependency graph inside the package:

    constants, types, diagnostics <- core <- runtime

Exports:
    KeyFlattener: Flattens trees and normalizes lookup keys (shared link table)
    LinkTable: Per-locale alias table with memoized prefix resolution
    escape_separator: Escape "." inside a single key segment
    flatten_keys: Depth-first (flat key, value) iterator over a tree
    normalize_segments: Link-free flat key for a (key, scope, separator) request

Python 3.13+.
"""

from .flattener import KeyFlattener
from .keys import escape_separator, flatten_keys, normalize_segments
from .links import LinkTable

__all__ = [
    "KeyFlattener",
    "LinkTable",
    "escape_separator",
    "flatten_keys",
    "normalize_segments",
]
