# ABOUTME: Converts between CatalogEntry dataclasses and JSON-ready item dictionaries.
# ABOUTME: Uses the camelCase keys of the jarfolio.json document format.

import re
from collections.abc import Callable, Mapping
from typing import Any

from jarfolio.model.types import DEFAULT_NAME, CatalogEntry, EntryDraft, new_entry_id

_DIGEST_RE = re.compile(r"[0-9a-f]{64}")

_TEXT_FIELDS = {
    "version": "version",
    "description": "description",
    "group_id": "groupId",
    "artifact_id": "artifactId",
    "url": "url",
    "repo": "repo",
    "license": "license",
}


def entry_to_item(entry: CatalogEntry) -> dict[str, Any]:
    """Convert a CatalogEntry to a dict suitable for JSON serialization."""
    return {
        "id": entry.id,
        "name": entry.name,
        "version": entry.version,
        "description": entry.description,
        "groupId": entry.group_id,
        "artifactId": entry.artifact_id,
        "tags": list(entry.tags),
        "url": entry.url,
        "repo": entry.repo,
        "license": entry.license,
        "size": entry.size,
        "digest": entry.digest,
        "addedAt": entry.added_at,
    }


def draft_to_entry(draft: EntryDraft, entry_id: str, added_at: int) -> CatalogEntry:
    """Finalize a draft with the fields assigned on insertion."""
    return CatalogEntry(
        id=entry_id,
        name=draft.name or DEFAULT_NAME,
        version=draft.version,
        description=draft.description,
        group_id=draft.group_id,
        artifact_id=draft.artifact_id,
        tags=tuple(draft.tags),
        url=draft.url,
        repo=draft.repo,
        license=draft.license,
        size=draft.size,
        digest=draft.digest,
        added_at=added_at,
    )


def _text(item: Mapping[str, Any], key: str) -> str | None:
    value = item.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")


def _count(item: Mapping[str, Any], key: str) -> int:
    """Read a non-negative integer field; missing or null counts as 0."""
    value = item.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"'{key}' must be a number, got {type(value).__name__}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"'{key}' must be a whole number, got {value}")
    if value < 0:
        raise ValueError(f"'{key}' must not be negative, got {value}")
    return int(value)


def _tags(item: Mapping[str, Any]) -> tuple[str, ...]:
    value = item.get("tags")
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValueError(f"'tags' must be a list, got {type(value).__name__}")
    if not all(isinstance(tag, str) for tag in value):
        raise ValueError("'tags' must contain only strings")
    return tuple(value)


def _digest(item: Mapping[str, Any]) -> str | None:
    # Older exports store the digest under "sha256".
    value = item.get("digest", item.get("sha256"))
    if value is None:
        return None
    if not isinstance(value, str) or not _DIGEST_RE.fullmatch(value.lower()):
        raise ValueError("'digest' must be a 64-character hex string")
    return value.lower()


def item_to_entry(
    item: Any,
    *,
    id_factory: Callable[[], str] = new_entry_id,
) -> CatalogEntry:
    """Convert a deserialized item dict back to a CatalogEntry.

    Missing optional fields take their documented defaults. An existing id
    is kept as-is; id_factory is only consulted when the item has none.

    Raises:
        ValueError: If the item is not a mapping or a field has the wrong type.
    """
    if not isinstance(item, Mapping):
        raise ValueError(f"item must be an object, got {type(item).__name__}")

    raw_id = item.get("id")
    if raw_id is None:
        entry_id = id_factory()
    elif isinstance(raw_id, str | int) and not isinstance(raw_id, bool):
        entry_id = str(raw_id)
    else:
        raise ValueError(f"'id' must be a string, got {type(raw_id).__name__}")

    text = {field: _text(item, key) for field, key in _TEXT_FIELDS.items()}
    return CatalogEntry(
        id=entry_id,
        name=_text(item, "name") or DEFAULT_NAME,
        tags=_tags(item),
        size=_count(item, "size"),
        digest=_digest(item),
        added_at=_count(item, "addedAt"),
        **text,
    )
