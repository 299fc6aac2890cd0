"""Exception types raised by the resonance engine."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigurationError",
    "InvalidInputError",
    "UnknownEntityError",
]


class InvalidInputError(ValueError):
    """Raised when a name cannot produce a usable fingerprint."""


class UnknownEntityError(KeyError):
    """Raised when a catalog identifier does not resolve to an entry."""

    def __init__(self, entry_id: object):
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self) -> str:
        return f"unknown catalog entry: {self.entry_id!r}"


class ConfigurationError(RuntimeError):
    """Raised when static tables, catalogs or settings fail validation."""

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []
