# ABOUTME: Filtered, sorted views over the catalog for display.
# ABOUTME: Pure functions; a view is derived on demand and never stored.

import locale
import unicodedata
from collections.abc import Iterable
from enum import Enum

from jarfolio.model.types import CatalogEntry


class SortMode(str, Enum):
    """Orderings a view can be sorted by."""

    RECENT = "recent"
    ALPHA = "alpha"
    SIZE = "size"


def search_text(entry: CatalogEntry) -> str:
    """The text a query is matched against: name, description, tags, coordinates.

    Absent fields contribute an empty string.
    """
    parts = [
        entry.name or "",
        entry.description or "",
        " ".join(entry.tags),
        entry.group_id or "",
        entry.artifact_id or "",
    ]
    return " ".join(parts).casefold()


def matches(entry: CatalogEntry, query: str) -> bool:
    """Case-insensitive substring match of the trimmed query; empty matches all."""
    needle = query.strip().casefold()
    if not needle:
        return True
    return needle in search_text(entry)


def _fold_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _name_key(entry: CatalogEntry) -> tuple[str, str]:
    """Collation key: accent-insensitive first, so "Émile" sorts with the E's.

    Both parts go through the active LC_COLLATE, and the accented form breaks
    ties between names that differ only by accents.
    """
    name = (entry.name or "").casefold()
    return (locale.strxfrm(_fold_accents(name)), locale.strxfrm(name))


def view(
    entries: Iterable[CatalogEntry],
    query: str = "",
    sort: SortMode | str = SortMode.RECENT,
) -> list[CatalogEntry]:
    """Filter entries by query and sort them for display.

    Sorting is stable, so entries that tie keep their catalog order.

    Args:
        entries: Catalog entries in storage order.
        query: Free-text filter; surrounding whitespace is ignored.
        sort: "recent" (newest first), "alpha" (by name), or "size" (largest first).

    Returns:
        A new list; empty when nothing matches.

    Raises:
        ValueError: If sort is not a known mode.
    """
    mode = SortMode(sort)
    filtered = [entry for entry in entries if matches(entry, query or "")]

    if mode is SortMode.ALPHA:
        return sorted(filtered, key=_name_key)
    if mode is SortMode.SIZE:
        return sorted(filtered, key=lambda entry: entry.size or 0, reverse=True)
    return sorted(filtered, key=lambda entry: entry.added_at or 0, reverse=True)
