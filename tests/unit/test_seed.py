from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from beastql.domain.models import Beast
from beastql.errors import SeedError
from beastql.infrastructure.seed import load_seed_file, parse_seed_document
from beastql.store.memory import InMemoryBeastStore

from tests.samples import MOTHMAN, SASQUATCH


def test_seed_round_trip_keeps_fields_intact(seeded_store: InMemoryBeastStore):
    beasts = seeded_store.all()

    assert len(beasts) == 1
    assert beasts[0].model_dump(by_alias=True) == SASQUATCH
    assert seeded_store.find_by_name("Sasquatch") == beasts[0]


def test_seed_reconciles_counter_with_seeded_ids(tmp_path: Path):
    path = tmp_path / "beasts.json"
    path.write_text(json.dumps([SASQUATCH, {**MOTHMAN, "id": 12}]), encoding="utf-8")
    store = InMemoryBeastStore(id_start=5)

    store.seed(path)

    assert store.counter == 12
    assert store.add(name="Jackalope", description="d").id == 13


def test_seed_missing_file_leaves_store_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    store = InMemoryBeastStore()

    with caplog.at_level(logging.ERROR):
        loaded = store.seed(tmp_path / "missing.json")

    assert loaded == 0
    assert len(store) == 0
    assert "Failed to seed" in caplog.text


def test_seed_malformed_json_is_not_fatal(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text('[{"id": 1, "name": ', encoding="utf-8")
    store = InMemoryBeastStore()

    assert store.seed(path) == 0
    assert store.all() == []


def test_seed_skips_invalid_items_and_keeps_valid_ones(tmp_path: Path):
    path = tmp_path / "mixed.json"
    path.write_text(
        json.dumps([SASQUATCH, "not-an-object", {"id": "abc", "name": "Bad"}, MOTHMAN]),
        encoding="utf-8",
    )
    store = InMemoryBeastStore()

    assert store.seed(path) == 2
    assert [b.name for b in store.all()] == ["Sasquatch", "Mothman"]


def test_seed_skips_duplicate_ids(tmp_path: Path):
    path = tmp_path / "dupes.json"
    path.write_text(json.dumps([SASQUATCH, {**MOTHMAN, "id": 1}]), encoding="utf-8")
    store = InMemoryBeastStore()

    assert store.seed(path) == 1
    assert store.all()[0].name == "Sasquatch"


def test_parse_seed_document_rejects_non_arrays():
    with pytest.raises(SeedError, match="JSON array"):
        parse_seed_document({"id": 1})


def test_parse_seed_document_tolerates_missing_and_null_fields():
    beasts = parse_seed_document([{"id": 7, "name": "Ogopogo", "otherNames": None}])

    assert beasts == [Beast(id=7, name="Ogopogo")]


def test_load_seed_file_reports_unreadable_path(tmp_path: Path):
    with pytest.raises(SeedError, match="Cannot read"):
        load_seed_file(tmp_path / "nope.json")


def test_bundled_seed_document_loads():
    bundled = Path(__file__).resolve().parents[2] / "beastData.json"

    beasts = load_seed_file(bundled)

    assert beasts
    assert beasts[0].name == "Sasquatch"
    assert len({b.id for b in beasts}) == len(beasts)


def test_seed_skips_items_without_a_positive_id(tmp_path: Path):
    path = tmp_path / "unnumbered.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Nameless", "description": "no id"},
                {"name": "Also Nameless", "description": "no id either"},
                {"id": 0, "name": "Zero"},
                {"id": -4, "name": "Negative"},
                MOTHMAN,
            ]
        ),
        encoding="utf-8",
    )
    store = InMemoryBeastStore()

    assert store.seed(path) == 1
    assert [b.id for b in store.all()] == [MOTHMAN["id"]]
    assert store.find_by_id(0) is None


def test_parse_seed_document_logs_items_without_id(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING):
        beasts = parse_seed_document([{"name": "Nameless"}])

    assert beasts == []
    assert "without a positive id" in caplog.text
