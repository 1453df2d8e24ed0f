"""
Store interface for BeastQL.

Resolvers depend on the `BeastStore` protocol only, so tests and the HTTP app
can inject any implementation (the in-memory store is the only one shipped).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from beastql.domain.models import Beast


@runtime_checkable
class BeastStore(Protocol):
    """
    Authoritative ordered collection of beasts plus the identifier counter.

    Implementations keep insertion order, never remove records, and hand out
    identifiers that are strictly greater than any identifier already held.
    """

    def seed(self, path: Path | str) -> int:
        """Load records from a JSON document; never raises on bad input."""
        ...

    def append(self, beast: Beast) -> Beast:
        """Add a record to the end of the sequence."""
        ...

    def add(
        self,
        name: str,
        description: str,
        other_names: Optional[Sequence[str]] = None,
        image_url: Optional[str] = None,
    ) -> Beast:
        """Assign the next identifier, build a record, and append it."""
        ...

    def find_by_name(self, name: str) -> Optional[Beast]:
        ...

    def find_by_id(self, beast_id: int) -> Optional[int]:
        ...

    def update_fields(self, beast_id: int, fields: Mapping[str, Any]) -> Beast:
        """
        Overwrite only the supplied fields of the record with `beast_id`.

        Returns the updated record, or `Beast.empty()` when no record matches.
        """
        ...

    def next_id(self) -> int:
        ...

    def all(self) -> List[Beast]:
        ...

    def __len__(self) -> int:
        ...


__all__ = ["BeastStore"]
