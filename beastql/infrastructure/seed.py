"""
Bootstrap loader for the beast store.

Reads a JSON array of beast objects (`id`, `name`, `description`, `otherNames`,
`imageUrl`) and validates each item into a `Beast`. File and document level
failures raise `SeedError`; items that fail validation are logged and skipped
so the valid remainder can still be loaded.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from beastql.domain.models import Beast
from beastql.errors import SeedError
from beastql.utils.logging import get_logger

log = get_logger(__name__)


def parse_seed_document(document: Any) -> List[Beast]:
    """
    Validate an already-decoded seed document.

    Parameters
    ----------
    document : Any
        Decoded JSON; must be a list of objects.

    Returns
    -------
    List[Beast]
        Valid records in document order.
    """
    if not isinstance(document, list):
        raise SeedError(f"Seed document must be a JSON array, got {type(document).__name__}")

    beasts: List[Beast] = []
    for position, item in enumerate(document):
        if not isinstance(item, dict):
            log.warning(
                "Skipping seed item that is not an object",
                extra={"position": position, "item_type": type(item).__name__},
            )
            continue
        try:
            beast = Beast.model_validate(item)
        except ValidationError as exc:
            log.warning(
                "Skipping invalid seed item",
                extra={"position": position, "errors": exc.error_count()},
            )
            continue
        # id 0 belongs to the empty lookup-miss beast.
        if "id" not in item or beast.id <= 0:
            log.warning(
                "Skipping seed item without a positive id",
                extra={"position": position, "beast_id": item.get("id")},
            )
            continue
        beasts.append(beast)
    return beasts


def load_seed_file(path: Path | str) -> List[Beast]:
    """
    Read and validate the seed document at `path`.

    Raises
    ------
    SeedError
        If the file cannot be read, is not valid JSON, or is not an array.
    """
    seed_path = Path(path)
    try:
        content = seed_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SeedError(f"Cannot read seed file {seed_path}: {exc}") from exc

    try:
        document = json.loads(content)
    except json.JSONDecodeError as exc:
        raise SeedError(f"Malformed JSON in seed file {seed_path}: {exc}") from exc

    beasts = parse_seed_document(document)
    log.debug("Parsed seed file", extra={"seed_path": str(seed_path), "beasts": len(beasts)})
    return beasts


__all__ = ["load_seed_file", "parse_seed_document"]
