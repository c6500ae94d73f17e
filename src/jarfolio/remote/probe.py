# ABOUTME: Best-effort size lookup for artifacts referenced by URL.
# ABOUTME: Reads Content-Length from a HEAD response; any failure degrades to no size.

import logging
import re
from urllib.parse import urlsplit

from jarfolio.model.outcome import Degraded, Ok, Outcome
from jarfolio.remote.http import HttpClient, SizeProbeError

logger = logging.getLogger(__name__)

_PROBE_SCHEMES = frozenset({"http", "https"})
_SCHEME_RE = re.compile(r"([A-Za-z][A-Za-z0-9+.-]*):")


def has_http_scheme(url: str | None) -> bool:
    """Whether a URL names http or https as its scheme, well-formed or not."""
    if not url:
        return False
    match = _SCHEME_RE.match(url)
    return match is not None and match.group(1).lower() in _PROBE_SCHEMES


def is_probeable(url: str | None) -> bool:
    """Whether a HEAD request can be sent to url: http(s) and parseable."""
    if not has_http_scheme(url):
        return False
    try:
        urlsplit(url)
    except ValueError:
        return False
    return True


def probe_size(client: HttpClient, url: str) -> Outcome[int]:
    """Ask the server how large the artifact at url is.

    Returns:
        Ok(byte_count) from the Content-Length header, or Degraded when the
        URL is unusable, the request fails, or the header is missing or
        malformed.
    """
    if not has_http_scheme(url):
        return Degraded(f"not an http(s) URL: {url}")
    if not is_probeable(url):
        logger.warning("Size probe skipped for malformed URL %s", url)
        return Degraded(f"malformed URL: {url}")

    try:
        headers = client.head(url)
    except SizeProbeError as exc:
        logger.warning("Size probe failed for %s: %s", url, exc)
        return Degraded(str(exc))

    length = headers.get("content-length")
    if length is None:
        return Degraded(f"no Content-Length from {url}")

    try:
        size = int(length.strip())
    except ValueError:
        return Degraded(f"invalid Content-Length {length!r} from {url}")
    if size < 0:
        return Degraded(f"invalid Content-Length {length!r} from {url}")
    return Ok(size)
