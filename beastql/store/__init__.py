"""
Store package for BeastQL.

Re-exports the store protocol and the in-memory implementation so downstream
code can import from `beastql.store` directly.
"""

from beastql.store.abstract import BeastStore
from beastql.store.memory import DEFAULT_ID_START, InMemoryBeastStore

__all__ = [
    "BeastStore",
    "DEFAULT_ID_START",
    "InMemoryBeastStore",
]
