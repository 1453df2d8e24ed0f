"""
BeastQL - a small GraphQL API over an in-memory bestiary.

The package exposes a single `Beast` entity through a GraphQL schema:

- Queries: look up one beast by exact name, or list every beast
- Mutations: add a beast, or update only the supplied fields of one

Records live in an in-memory store seeded once from a JSON document at
startup. Nothing is persisted beyond the lifetime of the process.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from beastql.api.schema import execute, print_schema_sdl, schema
from beastql.config import Settings, get_settings
from beastql.domain.models import Beast
from beastql.errors import BeastQLError, InvalidArgumentError, SeedError, StoreUnavailableError
from beastql.store import BeastStore, InMemoryBeastStore
from beastql.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Beast",
    # Store
    "BeastStore",
    "InMemoryBeastStore",
    # GraphQL
    "execute",
    "print_schema_sdl",
    "schema",
    # Errors
    "BeastQLError",
    "InvalidArgumentError",
    "SeedError",
    "StoreUnavailableError",
    # Logging
    "configure_logging",
    "get_logger",
]
