# ABOUTME: Unit tests for import-merge and export of catalog documents.
# ABOUTME: Validates prepend semantics, rejection without mutation, and export files.

import json
from pathlib import Path

import pytest

from jarfolio.core.transfer import EXPORT_FILENAME, export_to_file, import_and_merge
from jarfolio.model.types import EntryDraft
from jarfolio.store.catalog import CatalogStore
from jarfolio.store.connection import open_store
from jarfolio.store.snapshot import (
    SnapshotFormatError,
    SnapshotParseError,
    dump_snapshot,
    export_snapshot,
)


@pytest.fixture()
def two_entry_store(store: CatalogStore, clock) -> CatalogStore:
    store.add(EntryDraft(name="Foo", size=100))
    clock.advance(1000)
    store.add(EntryDraft(name="Bar", size=200))
    return store


class TestImportAndMerge:
    """Tests for import_and_merge."""

    def test_prepends_imported_items(self, two_entry_store: CatalogStore) -> None:
        """Importing one item into a catalog of two yields three, import first."""
        import_and_merge(two_entry_store, '{"items": [{"name": "X"}]}')
        names = [e.name for e in two_entry_store.list_all()]
        assert names == ["X", "Bar", "Foo"]

    def test_returns_imported_entries(self, two_entry_store: CatalogStore) -> None:
        imported = import_and_merge(
            two_entry_store, {"items": [{"id": "j_a", "name": "A"}, {"id": "j_b"}]}
        )
        assert [e.id for e in imported] == ["j_a", "j_b"]

    def test_keeps_document_order(self, store: CatalogStore) -> None:
        import_and_merge(store, {"items": [{"id": "1"}, {"id": "2"}, {"id": "3"}]})
        assert [e.id for e in store.list_all()] == ["1", "2", "3"]

    def test_no_dedupe_and_ids_kept(self, two_entry_store: CatalogStore) -> None:
        """Re-importing the catalog's own export duplicates every entry verbatim."""
        before = two_entry_store.list_all()
        import_and_merge(two_entry_store, dump_snapshot(before))
        assert two_entry_store.list_all() == before + before

    def test_digest_and_timestamps_untouched(self, store: CatalogStore) -> None:
        digest = "b" * 64
        import_and_merge(
            store, {"items": [{"id": "j_x", "digest": digest, "addedAt": 42, "size": 7}]}
        )
        entry = store.get_by_id("j_x")
        assert entry is not None
        assert entry.digest == digest
        assert entry.added_at == 42
        assert entry.size == 7

    def test_persists(self, two_entry_store: CatalogStore) -> None:
        import_and_merge(two_entry_store, '{"items": [{"name": "X"}]}')
        reloaded = CatalogStore(two_entry_store._conn).load()
        assert [e.name for e in reloaded] == ["X", "Bar", "Foo"]

    def test_accepts_bytes(self, store: CatalogStore) -> None:
        import_and_merge(store, b'{"items": [{"name": "X"}]}')
        assert len(store) == 1

    def test_wrong_shape_raises_format_error(self, two_entry_store: CatalogStore) -> None:
        """A document without an items list is rejected and nothing changes."""
        before = two_entry_store.list_all()
        with pytest.raises(SnapshotFormatError):
            import_and_merge(two_entry_store, '{"notItems": []}')
        assert two_entry_store.list_all() == before

    def test_bad_item_raises_format_error(self, two_entry_store: CatalogStore) -> None:
        with pytest.raises(SnapshotFormatError):
            import_and_merge(two_entry_store, '{"items": [{"name": "ok"}, 17]}')
        assert len(two_entry_store) == 2

    def test_malformed_json_raises_parse_error(self, two_entry_store: CatalogStore) -> None:
        with pytest.raises(SnapshotParseError):
            import_and_merge(two_entry_store, '{"items": [')
        assert len(two_entry_store) == 2

    def test_round_trip_into_empty_catalog(
        self, two_entry_store: CatalogStore, tmp_path: Path
    ) -> None:
        """Export then import into an empty catalog reproduces the same entries."""
        document = json.loads(json.dumps(export_snapshot(two_entry_store.list_all())))

        conn = open_store(tmp_path / "other.db")
        other = CatalogStore(conn)
        other.clear()
        import_and_merge(other, document)
        assert set(other.list_all()) == set(two_entry_store.list_all())
        conn.close()


class TestExportToFile:
    """Tests for export_to_file."""

    def test_writes_items_document(self, two_entry_store: CatalogStore, tmp_path: Path) -> None:
        path = tmp_path / EXPORT_FILENAME
        count = export_to_file(two_entry_store, path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert count == 2
        assert [item["name"] for item in data["items"]] == ["Bar", "Foo"]

    def test_export_filename(self) -> None:
        assert EXPORT_FILENAME == "jarfolio.json"

    def test_empty_catalog(self, store: CatalogStore, tmp_path: Path) -> None:
        path = tmp_path / "out.json"
        assert export_to_file(store, path) == 0
        assert json.loads(path.read_text(encoding="utf-8")) == {"items": []}