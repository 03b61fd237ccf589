"""Error types and message templates for flatl10n.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    AliasDepthExceededError,
    AliasResolutionError,
    CyclicAliasError,
    FlattenError,
)
from .templates import ErrorTemplate

__all__ = [
    "AliasDepthExceededError",
    "AliasResolutionError",
    "CyclicAliasError",
    "ErrorTemplate",
    "FlattenError",
]
