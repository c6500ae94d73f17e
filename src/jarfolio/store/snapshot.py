# ABOUTME: Encodes and decodes the { "items": [...] } snapshot document.
# ABOUTME: Shared by durable storage, export files, and import validation.

import json
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from jarfolio.model.types import CatalogEntry, new_entry_id
from jarfolio.store.mapping import entry_to_item, item_to_entry


class SnapshotError(Exception):
    """Base class for snapshot documents that cannot be turned into entries."""


class SnapshotParseError(SnapshotError):
    """Raised when a document is not well-formed JSON."""


class SnapshotFormatError(SnapshotError):
    """Raised when a document is valid JSON but not shaped like { "items": [...] }."""


def export_snapshot(entries: Iterable[CatalogEntry]) -> dict[str, Any]:
    """Build the portable snapshot document for a sequence of entries."""
    return {"items": [entry_to_item(entry) for entry in entries]}


def dump_snapshot(entries: Iterable[CatalogEntry], *, indent: int | None = 2) -> str:
    """Serialize entries to snapshot JSON text."""
    return json.dumps(export_snapshot(entries), indent=indent, ensure_ascii=False)


def parse_document(text: str | bytes) -> Any:
    """Parse snapshot text as JSON.

    Raises:
        SnapshotParseError: If the text is not well-formed JSON.
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SnapshotParseError(f"Failed to parse JSON: {exc}") from exc


def entries_from_document(
    data: Any,
    *,
    id_factory: Callable[[], str] = new_entry_id,
) -> list[CatalogEntry]:
    """Validate a parsed document and convert its items to entries.

    Every item must convert cleanly; a single bad item rejects the whole
    document.

    Raises:
        SnapshotFormatError: If there is no "items" list or an item is malformed.
    """
    if not isinstance(data, Mapping) or not isinstance(data.get("items"), list):
        raise SnapshotFormatError('Invalid JSON format (expected { "items": [...] })')

    entries: list[CatalogEntry] = []
    for index, item in enumerate(data["items"]):
        try:
            entries.append(item_to_entry(item, id_factory=id_factory))
        except ValueError as exc:
            raise SnapshotFormatError(f"Invalid item at index {index}: {exc}") from exc
    return entries


def load_snapshot(
    text: str | bytes,
    *,
    id_factory: Callable[[], str] = new_entry_id,
) -> list[CatalogEntry]:
    """Parse and validate snapshot text in one step."""
    return entries_from_document(parse_document(text), id_factory=id_factory)
