"""Tests for key-value storage backends."""

from __future__ import annotations

from collection_browser.favorites.storage import (
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
)


class TestMemoryStore:
    def test_get_missing(self):
        assert MemoryStore().get("nope") is None

    def test_set_get(self):
        store = MemoryStore()
        store.set("k", [1, 2])
        assert store.get("k") == [1, 2]

    def test_protocol(self):
        assert isinstance(MemoryStore(), KeyValueStore)


class TestJsonFileStore:
    def test_missing_file_reads_empty(self, tmp_path):
        assert JsonFileStore(tmp_path / "absent.json").get("k") is None

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "store.json"
        JsonFileStore(path).set("k", "v")
        assert path.exists()

    def test_keeps_other_keys(self, tmp_path):
        path = tmp_path / "store.json"
        store = JsonFileStore(path)
        store.set("a", 1)
        store.set("b", 2)
        assert store.get("a") == 1
        assert store.get("b") == 2

    def test_malformed_file_reads_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileStore(path)

        assert store.get("k") is None
        store.set("k", "v")
        assert store.get("k") == "v"

    def test_non_object_file_reads_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert JsonFileStore(path).get("k") is None

    def test_no_temp_file_left_behind(self, tmp_path):
        path = tmp_path / "store.json"
        JsonFileStore(path).set("k", "v")
        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]

    def test_protocol(self, tmp_path):
        assert isinstance(JsonFileStore(tmp_path / "s.json"), KeyValueStore)
