# ABOUTME: Public API for the Jarfolio storage layer.
# ABOUTME: Exports connection management, the catalog store, digests, and snapshot codecs.

from jarfolio.store.catalog import STORAGE_KEY, CatalogStore
from jarfolio.store.connection import DEFAULT_DB_PATH, open_store, store_session
from jarfolio.store.hashing import (
    DigestIOError,
    compute_digest,
    compute_file_digest,
    try_file_digest,
)
from jarfolio.store.snapshot import (
    SnapshotError,
    SnapshotFormatError,
    SnapshotParseError,
    dump_snapshot,
    export_snapshot,
    parse_document,
)

__all__ = [
    "DEFAULT_DB_PATH",
    "STORAGE_KEY",
    "CatalogStore",
    "DigestIOError",
    "SnapshotError",
    "SnapshotFormatError",
    "SnapshotParseError",
    "compute_digest",
    "compute_file_digest",
    "dump_snapshot",
    "export_snapshot",
    "open_store",
    "parse_document",
    "store_session",
    "try_file_digest",
]
