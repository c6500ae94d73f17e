# ABOUTME: Unit tests for the Maven dependency snippet.
# ABOUTME: Covers explicit coordinates and the fallbacks for missing ones.

from jarfolio.core.snippet import maven_snippet
from jarfolio.model.types import CatalogEntry


class TestMavenSnippet:
    """Tests for maven_snippet."""

    def test_explicit_coordinates(self) -> None:
        entry = CatalogEntry(
            id="j_1",
            name="DB-Connector",
            version="0.9.3",
            group_id="org.dbconn",
            artifact_id="db-connector-core",
        )
        assert maven_snippet(entry) == (
            "<dependency>\n"
            "  <groupId>org.dbconn</groupId>\n"
            "  <artifactId>db-connector-core</artifactId>\n"
            "  <version>0.9.3</version>\n"
            "</dependency>"
        )

    def test_defaults_for_missing_coordinates(self) -> None:
        """Missing fields fall back to com.example, a name slug, and 1.0.0."""
        entry = CatalogEntry(id="j_1", name="My Cool  Lib")
        snippet = maven_snippet(entry)
        assert "<groupId>com.example</groupId>" in snippet
        assert "<artifactId>my-cool-lib</artifactId>" in snippet
        assert "<version>1.0.0</version>" in snippet

    def test_blank_name_uses_artifact(self) -> None:
        entry = CatalogEntry(id="j_1", name="")
        assert "<artifactId>artifact</artifactId>" in maven_snippet(entry)
