# ABOUTME: The in-memory artifact catalog and its durable snapshot.
# ABOUTME: Add, remove, and replace entries; every mutation rewrites the whole snapshot.

import logging
import sqlite3
from collections.abc import Callable, Iterable, Iterator

from jarfolio.model.types import CatalogEntry, EntryDraft, new_entry_id, now_ms
from jarfolio.store.mapping import draft_to_entry
from jarfolio.store.seed import seed_entries
from jarfolio.store.snapshot import SnapshotError, dump_snapshot, load_snapshot

logger = logging.getLogger(__name__)

STORAGE_KEY = "jarfolio_v1"


class CatalogStore:
    """Owns the ordered list of catalog entries and keeps it persisted.

    Entries are stored newest-first. The snapshot under the storage key is
    rewritten on every mutation, and the in-memory list is only swapped once
    that write has committed, so a failed save leaves the catalog untouched.
    """

    def __init__(
        self,
        conn: sqlite3.Connection,
        *,
        key: str = STORAGE_KEY,
        clock: Callable[[], int] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._conn = conn
        self._key = key
        self._clock = clock or now_ms
        self._id_factory = id_factory or new_entry_id
        self._entries: list[CatalogEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(list(self._entries))

    def load(self) -> list[CatalogEntry]:
        """Load the persisted snapshot, falling back to the demo seed.

        A missing snapshot, or one that cannot be parsed, is replaced by the
        seed entries, which are persisted immediately. Parse failures are
        logged, never raised. Items stored without an id are given one and
        the snapshot is rewritten so the id is stable across loads.

        Returns:
            The loaded entries in storage order.
        """
        raw = self._read_snapshot()
        entries: list[CatalogEntry] | None = None
        assigned: list[str] = []

        def assign_id() -> str:
            entry_id = self._id_factory()
            assigned.append(entry_id)
            return entry_id

        if raw is not None:
            try:
                entries = load_snapshot(raw, id_factory=assign_id)
            except SnapshotError as exc:
                logger.warning("Failed to parse snapshot %r, reseeding: %s", self._key, exc)

        if entries is None:
            logger.info("Seeding catalog %r with demo entries", self._key)
            self._commit(seed_entries(now=self._clock(), id_factory=self._id_factory))
        elif assigned:
            logger.info("Assigned %d missing id(s) in %r", len(assigned), self._key)
            self._commit(entries)
        else:
            self._entries = entries

        return self.list_all()

    def save(self) -> None:
        """Write the current entries to durable storage."""
        self._write_snapshot(self._entries)

    def add(self, draft: EntryDraft) -> CatalogEntry:
        """Add an artifact to the front of the catalog.

        Args:
            draft: The artifact's fields, without id or timestamp.

        Returns:
            The stored entry with its new id and added_at.

        Raises:
            ValueError: If the draft's size is negative.
        """
        if draft.size < 0:
            raise ValueError(f"size must not be negative, got {draft.size}")

        entry = draft_to_entry(draft, self._id_factory(), self._clock())
        self._commit([entry, *self._entries])
        logger.debug("Added %s (%s)", entry.name, entry.id)
        return entry

    def remove(self, entry_id: str) -> bool:
        """Remove the entry with the given id.

        Returns:
            True if an entry was removed, False if none matched.
        """
        remaining = [entry for entry in self._entries if entry.id != entry_id]
        if len(remaining) == len(self._entries):
            return False

        self._commit(remaining)
        logger.debug("Removed %s", entry_id)
        return True

    def replace_all(self, entries: Iterable[CatalogEntry]) -> None:
        """Discard every entry and install the given sequence in its place."""
        self._commit(list(entries))
        logger.debug("Replaced catalog with %d entries", len(self._entries))

    def reset_to_seed(self) -> None:
        """Replace the catalog with a fresh copy of the demo entries."""
        self.replace_all(seed_entries(now=self._clock(), id_factory=self._id_factory))

    def clear(self) -> None:
        self.replace_all([])

    def get_by_id(self, entry_id: str) -> CatalogEntry | None:
        """Retrieve an entry by id; the first match wins if ids collide."""
        return next((entry for entry in self._entries if entry.id == entry_id), None)

    def list_all(self) -> list[CatalogEntry]:
        """Return all entries in storage order (newest first)."""
        return list(self._entries)

    # --- Persistence ---

    def _commit(self, entries: list[CatalogEntry]) -> None:
        self._write_snapshot(entries)
        self._entries = entries

    def _read_snapshot(self) -> str | None:
        cursor = self._conn.execute("SELECT value FROM snapshots WHERE key = ?", (self._key,))
        row = cursor.fetchone()
        return row[0] if row else None

    def _write_snapshot(self, entries: list[CatalogEntry]) -> None:
        self._conn.execute(
            "INSERT INTO snapshots (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value, "
            "updated_at = strftime('%Y-%m-%dT%H:%M:%S', 'now')",
            (self._key, dump_snapshot(entries, indent=None)),
        )
        self._conn.commit()
