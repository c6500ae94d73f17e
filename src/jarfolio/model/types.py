# ABOUTME: Core data structures for the Jarfolio artifact catalog.
# ABOUTME: CatalogEntry is the stored record; EntryDraft is the input to CatalogStore.add.

import re
import time
import uuid
from dataclasses import dataclass, field

DEFAULT_NAME = "Unnamed"


def new_entry_id() -> str:
    """Generate a fresh entry ID from 64 random bits, e.g. 'j_3f9c0a1b2d4e5f60'."""
    return f"j_{uuid.uuid4().hex[:16]}"


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def parse_tags(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated tag string, trimming whitespace and dropping empties."""
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class EntryDraft:
    """Everything about an artifact except the fields assigned on insertion.

    Ingestion builds one of these, fills in size and digest where it can,
    and hands it to CatalogStore.add, which stamps the id and added_at.
    """

    name: str = DEFAULT_NAME
    version: str | None = None
    description: str | None = None
    group_id: str | None = None
    artifact_id: str | None = None
    tags: tuple[str, ...] = ()
    url: str | None = None
    repo: str | None = None
    license: str | None = None
    size: int = 0
    digest: str | None = None


@dataclass(frozen=True)
class CatalogEntry:
    """One tracked artifact.

    Frozen so that id and added_at cannot change after creation. Tags are
    kept as a tuple in insertion order; duplicates are allowed.
    """

    id: str
    name: str = DEFAULT_NAME
    version: str | None = None
    description: str | None = None
    group_id: str | None = None
    artifact_id: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    url: str | None = None
    repo: str | None = None
    license: str | None = None
    size: int = 0
    digest: str | None = None
    added_at: int = 0

    @property
    def default_artifact_id(self) -> str:
        """artifact_id, or the name lowercased with whitespace runs turned into hyphens."""
        if self.artifact_id:
            return self.artifact_id
        return re.sub(r"\s+", "-", (self.name or "artifact").lower())

    @property
    def has_digest(self) -> bool:
        return self.digest is not None
