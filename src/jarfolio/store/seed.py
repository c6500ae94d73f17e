# ABOUTME: The demo entries a fresh catalog starts with.
# ABOUTME: Used on first run, after an unreadable snapshot, and by `jarfolio reset`.

from collections.abc import Callable

from jarfolio.model.types import CatalogEntry

_DAY_MS = 86_400_000


def seed_entries(*, now: int, id_factory: Callable[[], str]) -> list[CatalogEntry]:
    """Build the three demo entries, dated 10, 30 and 60 days before now."""
    return [
        CatalogEntry(
            id=id_factory(),
            name="Sparkle-CLI",
            version="2.1.0",
            description="Fast CLI for file transformations. Compact and battle-tested.",
            url="https://example.com/jars/sparkle-cli-2.1.0.jar",
            repo="https://github.com/you/sparkle-cli",
            license="Apache-2.0",
            tags=("cli", "utility"),
            size=1432164,
            added_at=now - _DAY_MS * 10,
        ),
        CatalogEntry(
            id=id_factory(),
            name="DB-Connector",
            version="1.4.3",
            description="Lightweight JDBC helper with connection pooling.",
            url="https://example.com/jars/db-connector-1.4.3.jar",
            repo="https://github.com/you/db-connector",
            license="MIT",
            tags=("db", "jdbc"),
            size=654320,
            added_at=now - _DAY_MS * 30,
        ),
        CatalogEntry(
            id=id_factory(),
            name="ImageOps",
            version="0.9.7",
            description="Image processing utilities (resize, crop, filter) for Java apps.",
            url="https://example.com/jars/imageops-0.9.7.jar",
            repo="https://github.com/you/imageops",
            license="BSD-3-Clause",
            tags=("image", "media"),
            size=2222331,
            added_at=now - _DAY_MS * 60,
        ),
    ]
