"""Custom BeastQL exceptions."""

from __future__ import annotations


class BeastQLError(RuntimeError):
    """Base class for BeastQL errors."""


class InvalidArgumentError(BeastQLError):
    """Raised when a store or resolver argument is unusable."""


class SeedError(BeastQLError):
    """Raised when the bootstrap document cannot be read or parsed."""


class StoreUnavailableError(BeastQLError):
    """Raised when a resolver runs without a store in its context."""


__all__ = ["BeastQLError", "InvalidArgumentError", "SeedError", "StoreUnavailableError"]
