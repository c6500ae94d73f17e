# ABOUTME: Maven dependency snippet for a catalog entry.
# ABOUTME: Falls back to com.example, a slug of the name, and 1.0.0 for missing coordinates.

from jarfolio.model.types import CatalogEntry

DEFAULT_GROUP_ID = "com.example"
DEFAULT_VERSION = "1.0.0"


def maven_snippet(entry: CatalogEntry) -> str:
    """Render a <dependency> block for the entry's Maven coordinates."""
    group = entry.group_id or DEFAULT_GROUP_ID
    version = entry.version or DEFAULT_VERSION
    return (
        "<dependency>\n"
        f"  <groupId>{group}</groupId>\n"
        f"  <artifactId>{entry.default_artifact_id}</artifactId>\n"
        f"  <version>{version}</version>\n"
        "</dependency>"
    )
