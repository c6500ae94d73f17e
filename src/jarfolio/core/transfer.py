# ABOUTME: Export of the catalog to a jarfolio.json document and import-merge back in.
# ABOUTME: Imported items are prepended as-is: no dedupe, no new ids, no re-hashing.

import logging
from pathlib import Path
from typing import Any

from jarfolio.model.types import CatalogEntry
from jarfolio.store.catalog import CatalogStore
from jarfolio.store.snapshot import dump_snapshot, entries_from_document, parse_document

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "jarfolio.json"


def import_and_merge(store: CatalogStore, document: Any) -> list[CatalogEntry]:
    """Merge an external snapshot document into the catalog.

    The document may be JSON text (str or bytes) or an already-parsed
    object. Its items are placed in front of the existing entries and the
    catalog is persisted. If the document is rejected the catalog is left
    exactly as it was.

    Args:
        store: The catalog to merge into.
        document: JSON text or parsed data shaped like { "items": [...] }.

    Returns:
        The imported entries, in document order.

    Raises:
        SnapshotParseError: If the text is not well-formed JSON.
        SnapshotFormatError: If the document has no "items" list or an item
            is malformed.
    """
    if isinstance(document, str | bytes | bytearray):
        document = parse_document(document)

    imported = entries_from_document(document)
    store.replace_all([*imported, *store.list_all()])
    logger.info("Imported %d entries", len(imported))
    return imported


def export_to_file(store: CatalogStore, path: Path) -> int:
    """Write the catalog snapshot to path as pretty-printed JSON.

    Returns:
        The number of entries written.
    """
    entries = store.list_all()
    path.write_text(dump_snapshot(entries) + "\n", encoding="utf-8")
    return len(entries)
