# ABOUTME: HTTP client abstraction for metadata-only requests against artifact URLs.
# ABOUTME: Provides HEAD with retry and backoff, and an injectable transport for testing.

import logging
import time
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class SizeProbeError(Exception):
    """Raised when a metadata request to an artifact URL fails."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HEAD requests that return response headers."""

    def head(self, url: str) -> Mapping[str, str]: ...


class JarfolioHttpClient:
    """HTTP client with retry for HEAD requests against artifact URLs.

    Wraps httpx.Client and retries transient failures (429, 5xx). No
    timeout is applied unless one is given.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        max_retries: int = 2,
        retry_delay: float = 0.5,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": "jarfolio/0.1.0"},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    def head(self, url: str) -> Mapping[str, str]:
        """Send a HEAD request with retry.

        Args:
            url: The URL to request.

        Returns:
            The response headers (case-insensitive mapping).

        Raises:
            SizeProbeError: On invalid URLs, transport errors, non-retryable HTTP errors,
                or exhausted retries.
        """
        attempts = 1 + self._max_retries
        last_status = 0
        for attempt in range(attempts):
            try:
                response = self._client.head(url)
                last_status = response.status_code
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise SizeProbeError(f"Request failed: {url}: {exc}") from exc

            if response.is_success:
                return response.headers

            if response.status_code not in _RETRYABLE_STATUS_CODES:
                raise SizeProbeError(f"HTTP {response.status_code} from {url}")

            if attempt < attempts - 1:
                delay = self._retry_delay * (2**attempt)
                logger.warning(
                    "HTTP %d from %s, retrying in %.1fs (attempt %d/%d)",
                    response.status_code,
                    url,
                    delay,
                    attempt + 1,
                    self._max_retries,
                )
                time.sleep(delay)

        raise SizeProbeError(f"HTTP {last_status} from {url} after {attempts} attempts")

    def close(self) -> None:
        self._client.close()
