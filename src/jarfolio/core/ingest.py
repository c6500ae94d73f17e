# ABOUTME: Ingestion of new artifacts into the catalog from local files or remote URLs.
# ABOUTME: Digests and size probes are best-effort; their failures never abort an add.

import dataclasses
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from jarfolio.model.outcome import Degraded, value_or
from jarfolio.model.types import CatalogEntry, EntryDraft
from jarfolio.remote.http import HttpClient
from jarfolio.remote.probe import has_http_scheme, probe_size
from jarfolio.store.catalog import CatalogStore
from jarfolio.store.hashing import compute_digest, try_file_digest

logger = logging.getLogger(__name__)

_JAR_SUFFIX_RE = re.compile(r"\.jar$", re.IGNORECASE)


@dataclass
class IngestResult:
    """The stored entry plus any best-effort steps that had to give up."""

    entry: CatalogEntry
    degraded: list[Degraded] = field(default_factory=list)

    @property
    def is_degraded(self) -> bool:
        return bool(self.degraded)


def display_name_for(filename: str) -> str:
    """Entry name for an uploaded file: the filename minus any .jar suffix."""
    return _JAR_SUFFIX_RE.sub("", filename)


def _upload_draft(filename: str) -> EntryDraft:
    return EntryDraft(
        name=display_name_for(filename),
        description=f"Uploaded: {filename}",
    )


def ingest_local_file(
    store: CatalogStore,
    path: Path,
    draft: EntryDraft | None = None,
) -> IngestResult:
    """Catalog an artifact from a file on disk.

    The entry's url becomes the file's file:// URI and its size the file's
    byte length. When the file cannot be read the digest stays None (and the
    size 0 if it cannot even be stat'ed); the entry is still added.

    Args:
        store: The catalog to add to.
        path: The local artifact.
        draft: Metadata to use; defaults to a name and description derived
            from the filename.

    Returns:
        IngestResult with the stored entry and any degradations.
    """
    base = draft or _upload_draft(path.name)
    degraded: list[Degraded] = []

    try:
        size = path.stat().st_size
    except OSError as exc:
        logger.warning("Could not stat %s: %s", path, exc)
        degraded.append(Degraded(f"Could not stat {path}: {exc}"))
        size = 0

    digest_outcome = try_file_digest(path)
    if isinstance(digest_outcome, Degraded):
        degraded.append(digest_outcome)

    entry = store.add(
        dataclasses.replace(
            base,
            url=path.resolve().as_uri(),
            size=size,
            digest=value_or(digest_outcome, None),
        )
    )
    return IngestResult(entry=entry, degraded=degraded)


def ingest_local_bytes(
    store: CatalogStore,
    data: bytes,
    filename: str,
    draft: EntryDraft | None = None,
) -> IngestResult:
    """Catalog an artifact whose bytes are already in memory.

    There is no durable local reference for in-memory bytes, so url is left
    as given in the draft.
    """
    base = draft or _upload_draft(filename)
    entry = store.add(
        dataclasses.replace(base, size=len(data), digest=compute_digest(data))
    )
    return IngestResult(entry=entry)


def ingest_remote_reference(
    store: CatalogStore,
    draft: EntryDraft,
    client: HttpClient | None = None,
) -> IngestResult:
    """Catalog an artifact described by user-supplied fields and a URL.

    When a client is given and the URL is http(s), a HEAD request fills in
    the size from Content-Length. Any probe failure, a malformed URL
    included, leaves the size as it was in the draft (0 unless set).

    Returns:
        IngestResult with the stored entry and any degradations.
    """
    degraded: list[Degraded] = []
    size = draft.size

    url = draft.url
    if client is not None and url and has_http_scheme(url):
        outcome = probe_size(client, url)
        if isinstance(outcome, Degraded):
            degraded.append(outcome)
        size = value_or(outcome, size)

    entry = store.add(dataclasses.replace(draft, size=size))
    return IngestResult(entry=entry, degraded=degraded)
