# ABOUTME: SQLite connection management for the Jarfolio snapshot store.
# ABOUTME: Opens or creates the database, applies schema, and provides connection context.

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from jarfolio.store.schema import SCHEMA

DEFAULT_DB_PATH = Path.home() / ".jarfolio" / "catalog.db"


def _schema_exists(conn: sqlite3.Connection) -> bool:
    """Check if the schema has already been applied."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='snapshots'"
    )
    return cursor.fetchone() is not None


def _apply_schema(conn: sqlite3.Connection) -> None:
    conn.executescript(SCHEMA)


def open_store(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the Jarfolio snapshot database.

    Creates the database file and parent directories if they don't exist.
    Creates the snapshots table on first use and sets sqlite3.Row as the row
    factory for dict-like column access.

    Args:
        path: Path to the database file. Defaults to ~/.jarfolio/catalog.db.

    Returns:
        A configured sqlite3.Connection.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    if not _schema_exists(conn):
        _apply_schema(conn)

    return conn


@contextmanager
def store_session(path: Path | None = None) -> Iterator[sqlite3.Connection]:
    """Open the snapshot database and close it when the block exits."""
    conn = open_store(path)
    try:
        yield conn
    finally:
        conn.close()
