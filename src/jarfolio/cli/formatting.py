# ABOUTME: Text helpers for rendering catalog entries in the terminal.
# ABOUTME: Human-readable byte sizes, truncation, and timestamp display.

from datetime import datetime

_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_bytes(size: int | None) -> str:
    """Format a byte count with binary units, e.g. 1536 -> '1.5 KB'."""
    if not size:
        return "0 B"
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 1):g} {_UNITS[unit]}"


def truncate(text: str | None, limit: int) -> str:
    """Shorten text to at most limit characters, ending with an ellipsis if cut."""
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


def format_timestamp(millis: int) -> str:
    """Render a millisecond epoch timestamp in local time."""
    if not millis:
        return "unknown"
    return datetime.fromtimestamp(millis / 1000).strftime("%Y-%m-%d %H:%M")
