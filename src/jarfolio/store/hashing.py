# ABOUTME: SHA-256 content digests for artifacts ingested from local files.
# ABOUTME: Reads files in chunks so large JARs are hashed without loading them whole.

import hashlib
import logging
from pathlib import Path

from jarfolio.model.outcome import Degraded, Ok, Outcome

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 65536  # 64 KB


class DigestIOError(OSError):
    """Raised when an artifact's bytes cannot be read for hashing."""


def compute_digest(data: bytes) -> str:
    """Return the lowercase hex SHA-256 digest (64 characters) of data."""
    return hashlib.sha256(data).hexdigest()


def compute_file_digest(path: Path) -> str:
    """Compute the SHA-256 digest of a file.

    Reads the file in 64KB chunks to avoid loading large files entirely
    into memory.

    Args:
        path: Path to the file to hash.

    Returns:
        Lowercase hex digest string (64 characters).

    Raises:
        DigestIOError: If the file cannot be opened or read.
    """
    hasher = hashlib.sha256()
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(_CHUNK_SIZE)
                if not chunk:
                    break
                hasher.update(chunk)
    except OSError as exc:
        raise DigestIOError(f"Could not read {path}: {exc}") from exc
    return hasher.hexdigest()


def try_file_digest(path: Path) -> Outcome[str]:
    """Best-effort variant of compute_file_digest.

    Returns Ok(digest) on success, or Degraded with the read error when the
    file cannot be hashed. Never raises for I/O failures.
    """
    try:
        return Ok(compute_file_digest(path))
    except DigestIOError as exc:
        logger.warning("Digest unavailable for %s: %s", path, exc)
        return Degraded(str(exc))
