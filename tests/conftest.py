# ABOUTME: Shared pytest fixtures for Jarfolio tests.
# ABOUTME: Provides a temporary catalog store, a controllable clock, and sample JAR files.

import itertools
from collections.abc import Iterator
from pathlib import Path

import pytest

from jarfolio.store.catalog import CatalogStore
from jarfolio.store.connection import open_store


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


class SequentialIds:
    """Deterministic id factory: j_test1, j_test2, ..."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"j_test{next(self._counter)}"


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path to a fresh catalog database."""
    return tmp_path / "catalog.db"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(db_path: Path, clock: FakeClock) -> Iterator[CatalogStore]:
    """A CatalogStore over a fresh database, starting empty (not loaded or seeded)."""
    conn = open_store(db_path)
    yield CatalogStore(conn, clock=clock, id_factory=SequentialIds())
    conn.close()


@pytest.fixture
def sample_jar(tmp_path: Path) -> Path:
    """A small fake JAR file with known content."""
    path = tmp_path / "sparkle-cli-2.1.0.jar"
    path.write_bytes(b"PK\x03\x04 fake jar content for hashing")
    return path
