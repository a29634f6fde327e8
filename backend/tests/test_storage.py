import pytest

from exceptions import PersistenceException
from models import ScanHistoryEntry
from services import HistoryStore, LocalStorage


def _entries(n, start=1_700_000_000_000):
    return [
        ScanHistoryEntry(
            id=str(start - i),
            title=f"Article {i}...",
            timestamp=start - i,
            score=10 * (i % 10),
            verdict="Unreliable",
        )
        for i in range(n)
    ]


class TestLocalStorage:

    def test_missing_key(self, tmp_path):
        assert LocalStorage(tmp_path).get_item("nothing") is None

    def test_set_get_remove(self, tmp_path):
        storage = LocalStorage(tmp_path / "nested")
        storage.set_item("k", "value")
        assert storage.get_item("k") == "value"
        storage.set_item("k", "other")
        assert storage.get_item("k") == "other"
        storage.remove_item("k")
        assert storage.get_item("k") is None
        # removing twice is fine
        storage.remove_item("k")

    def test_no_temp_files_left(self, tmp_path):
        storage = LocalStorage(tmp_path)
        storage.set_item("k", "value")
        assert [p.name for p in tmp_path.iterdir()] == ["k.json"]


class TestHistoryStore:

    def test_round_trip(self, history_store):
        entries = _entries(3)
        history_store.save(entries)
        assert history_store.load() == entries

    def test_empty_when_never_saved(self, history_store):
        assert history_store.load() == []

    def test_clear_removes_key(self, history_store):
        history_store.save(_entries(2))
        history_store.clear()
        assert history_store.storage.get_item(history_store.key) is None
        assert history_store.load() == []

    def test_malformed_blob(self, history_store):
        history_store.storage.set_item(history_store.key, "{not json")
        with pytest.raises(PersistenceException):
            history_store.load()

    def test_wrong_shape(self, history_store):
        history_store.storage.set_item(history_store.key, '[{"id": 1}]')
        with pytest.raises(PersistenceException):
            history_store.load()

    def test_load_caps_to_limit(self, history_store):
        history_store.save(_entries(14))
        assert len(history_store.load()) == 10

    def test_uses_single_history_key(self, tmp_path):
        store = HistoryStore(LocalStorage(tmp_path))
        store.save(_entries(1))
        assert (tmp_path / "veritas_history.json").exists()
