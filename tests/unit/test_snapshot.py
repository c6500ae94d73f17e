# ABOUTME: Unit tests for the { "items": [...] } snapshot document codec.
# ABOUTME: Validates export shape, JSON parse errors, and document format errors.

import json

import pytest

from jarfolio.model.types import CatalogEntry
from jarfolio.store.snapshot import (
    SnapshotError,
    SnapshotFormatError,
    SnapshotParseError,
    dump_snapshot,
    entries_from_document,
    export_snapshot,
    load_snapshot,
    parse_document,
)

ENTRIES = [
    CatalogEntry(id="j_1", name="Foo", size=100, added_at=1000),
    CatalogEntry(id="j_2", name="Bar", size=200, added_at=2000, tags=("db",)),
]


class TestExportSnapshot:
    """Tests for export_snapshot and dump_snapshot."""

    def test_top_level_shape(self) -> None:
        document = export_snapshot(ENTRIES)
        assert list(document) == ["items"]
        assert [item["name"] for item in document["items"]] == ["Foo", "Bar"]

    def test_empty_catalog(self) -> None:
        assert export_snapshot([]) == {"items": []}

    def test_dump_is_valid_json(self) -> None:
        assert json.loads(dump_snapshot(ENTRIES)) == export_snapshot(ENTRIES)

    def test_dump_round_trips(self) -> None:
        assert load_snapshot(dump_snapshot(ENTRIES)) == ENTRIES


class TestParseDocument:
    """Tests for parse_document."""

    def test_parses_text_and_bytes(self) -> None:
        assert parse_document('{"items": []}') == {"items": []}
        assert parse_document(b'{"items": []}') == {"items": []}

    @pytest.mark.parametrize("text", ["", "{not json", "{'items': []}", b"\xff\xfe\xfa"])
    def test_malformed_json_raises_parse_error(self, text: str | bytes) -> None:
        with pytest.raises(SnapshotParseError):
            parse_document(text)

    def test_parse_error_is_snapshot_error(self) -> None:
        with pytest.raises(SnapshotError):
            parse_document("nope")


class TestEntriesFromDocument:
    """Tests for entries_from_document."""

    @pytest.mark.parametrize(
        "data",
        [
            {"notItems": []},
            {"items": {"a": 1}},
            {"items": "x"},
            [],
            None,
            42,
        ],
    )
    def test_wrong_shape_raises_format_error(self, data: object) -> None:
        with pytest.raises(SnapshotFormatError):
            entries_from_document(data)

    def test_bad_item_rejects_whole_document(self) -> None:
        data = {"items": [{"id": "j_1", "name": "ok"}, {"id": "j_2", "size": "big"}]}
        with pytest.raises(SnapshotFormatError, match="index 1"):
            entries_from_document(data)

    def test_empty_items_is_valid(self) -> None:
        assert entries_from_document({"items": []}) == []

    def test_ignores_extra_top_level_keys(self) -> None:
        entries = entries_from_document({"items": [{"id": "j_1"}], "version": 2})
        assert [e.id for e in entries] == ["j_1"]
