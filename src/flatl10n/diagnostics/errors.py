"""Exception hierarchy for flatl10n.

Flattening and key normalization are total over well-formed input; these
exceptions cover the backend layer, where following alias chains can fail.
Programmer errors (wrong argument types, empty locale codes, malformed
separators) use the builtin TypeError and ValueError instead.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "AliasDepthExceededError",
    "AliasResolutionError",
    "CyclicAliasError",
    "FlattenError",
]


class FlattenError(Exception):
    """Base exception for all flatl10n errors."""


class AliasResolutionError(FlattenError):
    """An alias chain could not be followed to a translation.

    Attributes:
        locale: Locale whose link table was consulted
        chain: Flat keys visited, in order, ending with the offending key
    """

    def __init__(self, message: str, locale: str, chain: tuple[str, ...]) -> None:
        """Initialize AliasResolutionError.

        Args:
            message: Human-readable error message
            locale: Locale whose link table was consulted
            chain: Flat keys visited while following the alias
        """
        super().__init__(message)
        self.locale = locale
        self.chain = chain


class CyclicAliasError(AliasResolutionError):
    """Alias chain returned to a key it had already visited.

    Example: a -> b, b -> a.
    """


class AliasDepthExceededError(AliasResolutionError):
    """Alias chain is longer than the configured maximum depth."""
