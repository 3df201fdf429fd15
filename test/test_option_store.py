"""
Tests for the JSON-file option store
"""

from app.services.option_service import OptionStore


class TestOptionStore:
    def test_default_when_missing(self, tmp_path):
        store = OptionStore(tmp_path / "options.json")
        assert store.get("featured_magician", 0) == 0
        assert store.get("anything") is None

    def test_set_then_get(self, tmp_path):
        store = OptionStore(tmp_path / "options.json")
        store.set("featured_magician", 7)
        assert store.get("featured_magician", 0) == 7

    def test_persisted_across_instances(self, tmp_path):
        OptionStore(tmp_path / "options.json").set("featured_magician", 3)
        assert OptionStore(tmp_path / "options.json").get("featured_magician") == 3

    def test_set_keeps_other_keys(self, tmp_path):
        store = OptionStore(tmp_path / "options.json")
        store.set("a", 1)
        store.set("b", 2)
        assert store.get("a") == 1
        assert store.get("b") == 2

    def test_creates_parent_directory(self, tmp_path):
        store = OptionStore(tmp_path / "nested" / "dir" / "options.json")
        store.set("key", "value")
        assert (tmp_path / "nested" / "dir" / "options.json").exists()

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "options.json"
        path.write_text("{not json", encoding="utf-8")
        assert OptionStore(path).get("featured_magician", 0) == 0
