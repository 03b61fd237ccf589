"""Configuration for FlatBackend.

One frozen dataclass carries every backend option so the default separator,
subtree mode and locking choice travel together as explicit configuration
rather than module-level globals.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from flatl10n.constants import DEFAULT_SEPARATOR, MAX_ALIAS_DEPTH
from flatl10n.core.keys import validate_separator

__all__ = ["FlattenConfig"]


@dataclass(frozen=True, slots=True)
class FlattenConfig:
    """Immutable configuration for FlatBackend.

    All fields have defaults; ``FlattenConfig()`` is a usable configuration.

    Attributes:
        default_separator: Separator assumed for lookup keys when a call
            passes none (default: "."). Must be a single character.
        subtree: Keep intermediate subtrees as entries when storing
            translations (default: False).
        thread_safe: Guard the backend with a readers-writer lock
            (default: False).
        max_alias_depth: Maximum alias hops followed by lookup()
            (default: 100).
        canonicalize_locales: Collapse locale spellings with Babel before
            keying per-locale state (default: True).

    Example:
        >>> config = FlattenConfig(default_separator="/", thread_safe=True)
        >>> backend = FlatBackend(config)
        >>> backend.config.default_separator
        '/'
    """

    default_separator: str = DEFAULT_SEPARATOR
    subtree: bool = False
    thread_safe: bool = False
    max_alias_depth: int = MAX_ALIAS_DEPTH
    canonicalize_locales: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_separator is not a single character or
                max_alias_depth is not positive.
        """
        validate_separator(self.default_separator)
        if self.max_alias_depth <= 0:
            msg = "max_alias_depth must be positive"
            raise ValueError(msg)
