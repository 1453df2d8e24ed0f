"""
Pytest configuration for BeastQL.

Provides fixtures for:
- Seed documents written to a temporary directory
- Isolated in-memory stores (never shared between tests)
- Settings override that ignores the developer's environment
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Generator

import pytest

from beastql.config import Settings, get_settings
from beastql.domain.models import Beast
from beastql.store.memory import InMemoryBeastStore
from tests.samples import MOTHMAN, SASQUATCH


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Reset the cached Settings so env overrides in one test never leak into another.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """
    Bootstrap document containing a single Sasquatch record.
    """
    path = tmp_path / "beastData.json"
    path.write_text(json.dumps([SASQUATCH]), encoding="utf-8")
    return path


@pytest.fixture
def store() -> InMemoryBeastStore:
    """
    Empty store with the default counter start.
    """
    return InMemoryBeastStore()


@pytest.fixture
def seeded_store(seed_file: Path) -> InMemoryBeastStore:
    """
    Store seeded from `seed_file`.
    """
    seeded = InMemoryBeastStore()
    seeded.seed(seed_file)
    return seeded


@pytest.fixture
def bestiary_store() -> InMemoryBeastStore:
    """
    Store holding Sasquatch (id 1) and Mothman (id 3).
    """
    return InMemoryBeastStore(beasts=[Beast.model_validate(SASQUATCH), Beast.model_validate(MOTHMAN)])


@pytest.fixture
def test_settings(seed_file: Path) -> Settings:
    """
    Settings fixture with test-specific overrides, independent of `.env`.
    """
    return Settings(
        _env_file=None,
        beast_seed_path=seed_file,
        beast_id_start=5,
        log_level="DEBUG",
        graphql_path="/graphql",
        graphiql_enabled=True,
    )
