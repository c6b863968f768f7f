"""Shared pytest fixtures for nullstr tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import Column, Integer, MetaData, Table, create_engine
from sqlalchemy.engine import Engine

from nullstr.config.settings import reset_settings
from nullstr.infrastructure.database import NullStringType

metadata = MetaData()

PEOPLE = Table(
    "people",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("nickname", NullStringType()),
)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate every test from ``NULLSTR_*`` variables and cached settings."""
    for name in ("NULLSTR_VERBOSE", "NULLSTR_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def db_engine() -> Generator[Engine]:
    """In-memory SQLite engine with the ``people`` table created."""
    engine = create_engine("sqlite://", echo=False)
    metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def people() -> Table:
    """The ``people`` table: integer id plus a NullString ``nickname`` column."""
    return PEOPLE
