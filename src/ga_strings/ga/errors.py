"""Exceptions raised by the evolution engine."""

from __future__ import annotations


class GAStringsError(Exception):
    """Base class for engine errors."""


class ConfigurationError(GAStringsError, ValueError):
    """Configuration values are out of range or malformed."""


class InvalidTargetError(GAStringsError, ValueError):
    """Target contains symbols that are not in the character pool."""

    def __init__(self, invalid_symbols: list[str]) -> None:
        self.invalid_symbols = list(invalid_symbols)
        listed = ", ".join(f"'{s}'" for s in self.invalid_symbols)
        super().__init__(f"Target contains characters not in the selected character set: {listed}")


class NotInitializedError(GAStringsError, RuntimeError):
    """An operation needs a population but initialize() has not been called."""
