"""
In-memory beast store.

Holds the ordered list of beasts for the lifetime of the process. Every public
operation runs under one re-entrant lock, so concurrent `add` calls cannot
hand out the same identifier and readers never observe a half-applied update.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from beastql.domain.models import MUTABLE_FIELDS, Beast
from beastql.errors import InvalidArgumentError, SeedError
from beastql.infrastructure.seed import load_seed_file
from beastql.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_ID_START = 5


class InMemoryBeastStore:
    """
    Process-local `BeastStore` backed by a list.

    Parameters
    ----------
    id_start : int
        Initial value of the running-maximum counter; the first `add` returns
        `id_start + 1` unless appended records already carry larger ids.
    beasts : iterable[Beast] | None
        Records to append up front, in order.
    """

    def __init__(self, id_start: int = DEFAULT_ID_START, beasts: Optional[Iterable[Beast]] = None) -> None:
        self._lock = threading.RLock()
        self._beasts: List[Beast] = []
        self._counter = id_start
        for beast in beasts or ():
            self.append(beast)

    @property
    def counter(self) -> int:
        """Largest identifier handed out or seen so far."""
        with self._lock:
            return self._counter

    def seed(self, path: Path | str) -> int:
        """
        Append every valid record from the JSON document at `path`.

        Failures are logged, never raised: an unreadable or malformed file
        leaves the store untouched, and records with an identifier already in
        the store are skipped.
        """
        try:
            beasts = load_seed_file(path)
        except SeedError as exc:
            log.error("Failed to seed beast store: %s", exc, extra={"seed_path": str(path)})
            return 0

        loaded = 0
        with self._lock:
            for beast in beasts:
                try:
                    self.append(beast)
                except InvalidArgumentError as exc:
                    log.warning("Skipping seed record: %s", exc, extra={"beast_id": beast.id})
                    continue
                loaded += 1
        log.info(
            "Seeded beast store",
            extra={"seed_path": str(path), "beasts": loaded, "counter": self.counter},
        )
        return loaded

    def append(self, beast: Beast) -> Beast:
        with self._lock:
            if self.find_by_id(beast.id) is not None:
                raise InvalidArgumentError(f"Duplicate beast id {beast.id}")
            self._beasts.append(beast)
            # Keep the counter ahead of externally supplied ids.
            self._counter = max(self._counter, beast.id)
            return beast

    def add(
        self,
        name: str,
        description: str,
        other_names: Optional[Sequence[str]] = None,
        image_url: Optional[str] = None,
    ) -> Beast:
        with self._lock:
            try:
                beast = Beast(
                    id=self._counter + 1,
                    name=name,
                    description=description,
                    other_names=list(other_names or []),
                    image_url=image_url or "",
                )
            except ValidationError as exc:
                raise InvalidArgumentError(f"Invalid beast: {exc}") from exc
            self.next_id()
            self._beasts.append(beast)
        log.info("Added beast", extra={"beast_id": beast.id, "beast_name": beast.name})
        return beast

    def find_by_name(self, name: str) -> Optional[Beast]:
        with self._lock:
            for beast in self._beasts:
                if beast.name == name:
                    return beast
        return None

    def find_by_id(self, beast_id: int) -> Optional[int]:
        with self._lock:
            for index, beast in enumerate(self._beasts):
                if beast.id == beast_id:
                    return index
        return None

    def update_fields(self, beast_id: int, fields: Mapping[str, Any]) -> Beast:
        unknown = set(fields) - MUTABLE_FIELDS
        if unknown:
            raise InvalidArgumentError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        changes = dict(fields)
        with self._lock:
            index = self.find_by_id(beast_id)
            if index is None:
                log.debug("Update missed", extra={"beast_id": beast_id})
                return Beast.empty()
            try:
                updated = Beast.model_validate({**self._beasts[index].model_dump(), **changes})
            except ValidationError as exc:
                raise InvalidArgumentError(f"Invalid update for beast {beast_id}: {exc}") from exc
            self._beasts[index] = updated
        log.info("Updated beast", extra={"beast_id": beast_id, "fields": sorted(changes)})
        return updated

    def next_id(self) -> int:
        with self._lock:
            self._counter += 1
            return self._counter

    def all(self) -> List[Beast]:
        with self._lock:
            return list(self._beasts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._beasts)


__all__ = ["DEFAULT_ID_START", "InMemoryBeastStore"]
