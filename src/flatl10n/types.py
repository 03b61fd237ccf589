"""Types for translation trees and their flattened form.

Provides the alias marker that distinguishes links from plain strings, and
semantic type aliases used throughout the package and by user code when
annotating call sites.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = [
    "AliasRef",
    "FlatKey",
    "FlatMapping",
    "KeySegment",
    "LocaleCode",
    "TranslationTree",
    "TranslationValue",
]


@dataclass(frozen=True, slots=True)
class AliasRef:
    """Leaf value naming another translation key.

    A plain string leaf is a translation; an AliasRef leaf says "use the value
    stored under this other key instead". Flattening records every AliasRef in
    the link table so later lookups can substitute the target key.

    Example:
        >>> tree = {"errors": {"missing": AliasRef("errors.not_found")}}
        >>> str(tree["errors"]["missing"])
        'errors.not_found'

    Attributes:
        target: Flat key (dot-joined) the alias points at
    """

    target: str

    def __post_init__(self) -> None:
        """Reject empty targets."""
        if not isinstance(self.target, str):
            msg = f"Alias target must be str, got {type(self.target).__name__}"
            raise TypeError(msg)
        if not self.target:
            msg = "Alias target cannot be empty"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.target


type LocaleCode = str
"""Locale code as supplied by the caller (e.g., 'en', 'en-US', 'pt_BR')."""

type KeySegment = str
"""One level of a translation tree key (e.g., 'errors')."""

type FlatKey = str
"""Composite key of escaped segments joined by '.' (e.g., 'errors.not_found')."""

type TranslationValue = (
    str | int | float | bool | AliasRef | Mapping[object, TranslationValue] | None
)
"""Leaf translation, alias marker, or nested subtree."""

type TranslationTree = Mapping[object, TranslationValue]
"""Nested, ordered mapping of key segments to translation values."""

type FlatMapping = dict[FlatKey, TranslationValue]
"""Single-level mapping produced by flattening a TranslationTree."""
