# ABOUTME: Result type for best-effort operations that may degrade instead of failing.
# ABOUTME: Ok wraps a value; Degraded records why the value is unavailable.

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A best-effort operation that produced its value."""

    value: T


@dataclass(frozen=True)
class Degraded:
    """A best-effort operation that gave up; the caller falls back to a default.

    Used for content digests and remote size probes, neither of which may
    abort an ingestion.
    """

    reason: str

    def __post_init__(self) -> None:
        if not self.reason:
            msg = "Degraded outcome needs a reason"
            raise ValueError(msg)


Outcome = Ok[T] | Degraded


def value_or(outcome: "Outcome[T]", default: T) -> T:
    """Return the wrapped value, or default when the outcome is degraded."""
    if isinstance(outcome, Ok):
        return outcome.value
    return default
