# ABOUTME: Remote package for metadata-only network lookups on artifact URLs.
# ABOUTME: Exports the HTTP client and the best-effort size probe.

from jarfolio.remote.http import HttpClient, JarfolioHttpClient, SizeProbeError
from jarfolio.remote.probe import has_http_scheme, is_probeable, probe_size

__all__ = [
    "HttpClient",
    "JarfolioHttpClient",
    "SizeProbeError",
    "has_http_scheme",
    "is_probeable",
    "probe_size",
]
