"""Error message templates.

All user-facing error messages are built here so exception constructors never
carry inline f-strings and tests can assert on one source of wording.

Python 3.13+. Zero external dependencies.
"""

from flatl10n.constants import SEPARATOR_ESCAPE_CHAR

__all__ = ["ErrorTemplate"]


def _readable(key: str) -> str:
    """Render escaped separators visibly for error messages."""
    return key.replace(SEPARATOR_ESCAPE_CHAR, "\\.")


class ErrorTemplate:
    """Centralized error message templates."""

    @staticmethod
    def cyclic_alias(locale: str, chain: tuple[str, ...]) -> str:
        """Alias chain revisits a key.

        Args:
            locale: Locale being resolved
            chain: Keys visited, ending with the repeated key

        Returns:
            Error message
        """
        path = " -> ".join(_readable(key) for key in chain)
        return f"Cyclic alias in locale '{locale}': {path}"

    @staticmethod
    def alias_depth_exceeded(locale: str, key: str, max_depth: int) -> str:
        """Alias chain too long.

        Args:
            locale: Locale being resolved
            key: Key at which following stopped
            max_depth: Configured maximum number of hops

        Returns:
            Error message
        """
        return (
            f"Alias chain in locale '{locale}' exceeded {max_depth} hops "
            f"at '{_readable(key)}'"
        )

    @staticmethod
    def invalid_tree(tree: object) -> str:
        """Non-mapping value passed where a translation tree is expected."""
        return f"Translation tree must be a Mapping, got {type(tree).__name__}"

    @staticmethod
    def invalid_separator(separator: object) -> str:
        """Separator is not a single character."""
        return f"Separator must be a single character, got {separator!r}"

    @staticmethod
    def empty_locale() -> str:
        """Empty locale code."""
        return "Locale code cannot be empty"

    @staticmethod
    def invalid_locale(locale: object) -> str:
        """Locale code with characters outside [A-Za-z0-9_-]."""
        return f"Invalid locale code format: '{locale}'"
