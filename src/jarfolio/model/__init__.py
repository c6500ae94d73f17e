# ABOUTME: Model package for Jarfolio catalog records and best-effort results.
# ABOUTME: Exports CatalogEntry, EntryDraft, and the Ok/Degraded outcome types.

from jarfolio.model.outcome import Degraded, Ok, Outcome, value_or
from jarfolio.model.types import (
    DEFAULT_NAME,
    CatalogEntry,
    EntryDraft,
    new_entry_id,
    now_ms,
    parse_tags,
)

__all__ = [
    "DEFAULT_NAME",
    "CatalogEntry",
    "Degraded",
    "EntryDraft",
    "Ok",
    "Outcome",
    "new_entry_id",
    "now_ms",
    "parse_tags",
    "value_or",
]
