"""
Tests for HistoryStore

Covers dedup, ordering, the size cap and recovery from corrupt storage.
"""
import json

from askbox.core import HistoryStore, JsonFileStore, MemoryStore

from .conftest import ReadOnlyStore


class TestRecord:
    """Tests for recording submitted questions"""

    def test_record_prepends_most_recent_first(self, history):
        history.record("first")
        history.record("second")

        assert history.record("third") == ["third", "second", "first"]

    def test_record_persists_json_array(self, history, memory_store):
        history.record("hello")

        assert json.loads(memory_store.get("history")) == ["hello"]

    def test_immediate_duplicate_is_noop(self, history, memory_store):
        history.record("a")
        history.record("b")
        stored = memory_store.get("history")

        assert history.record("b") == ["b", "a"]
        assert memory_store.get("history") == stored

    def test_resubmitted_value_moves_to_front(self, history):
        for text in ["a", "b", "c"]:
            history.record(text)

        assert history.record("a") == ["a", "c", "b"]

    def test_cap_keeps_fifty_most_recent(self, history):
        for i in range(60):
            history.record(f"q{i}")

        entries = history.load()
        assert len(entries) == 50
        assert entries == [f"q{i}" for i in range(59, 9, -1)]

    def test_no_duplicates_after_mixed_sequence(self, history):
        for text in ["x", "y", "x", "z", "y", "y", "x", "w"]:
            history.record(text)

        entries = history.load()
        assert len(entries) == len(set(entries))
        assert entries == ["w", "x", "y", "z"]

    def test_custom_limit(self, memory_store):
        store = HistoryStore(memory_store, limit=3)
        for text in "abcde":
            store.record(text)

        assert store.entries == ["e", "d", "c"]

    def test_entries_snapshot_is_a_copy(self, history):
        history.record("a")
        snapshot = history.entries
        snapshot.append("mutated")

        assert history.entries == ["a"]


class TestLoad:
    """Tests for reading history back from storage"""

    def test_missing_key_is_empty(self, history):
        assert history.load() == []

    def test_corrupt_payload_resets_and_clears_key(self):
        store = MemoryStore({"history": "not json{"})
        history = HistoryStore(store)

        assert history.load() == []
        assert store.get("history") is None

    def test_non_list_payload_is_corrupt(self):
        store = MemoryStore({"history": json.dumps({"a": 1})})

        assert HistoryStore(store).load() == []
        assert store.get("history") is None

    def test_existing_history_survives_reload(self, memory_store):
        HistoryStore(memory_store).record("kept")

        assert HistoryStore(memory_store).entries == ["kept"]

    def test_non_string_items_are_dropped(self):
        store = MemoryStore({"history": json.dumps(["ok", 3, None, ""])})

        assert HistoryStore(store).load() == ["ok"]

    def test_record_after_corrupt_payload(self):
        store = MemoryStore({"history": "[broken"})
        history = HistoryStore(store)

        assert history.record("fresh") == ["fresh"]
        assert json.loads(store.get("history")) == ["fresh"]


class TestClear:
    """Tests for clearing history"""

    def test_clear_removes_persisted_and_memory(self, history, memory_store):
        history.record("a")
        history.clear()

        assert history.entries == []
        assert memory_store.get("history") is None
        assert history.load() == []

    def test_clear_on_file_store(self, tmp_path):
        path = tmp_path / "storage.json"
        history = HistoryStore(JsonFileStore(path))
        history.record("a")
        history.clear()

        assert json.loads(path.read_text(encoding="utf-8")) == {}


class TestStorageFailures:
    """Write failures while recovering or clearing never escape"""

    def test_corrupt_payload_on_read_only_store_reads_empty(self):
        store = ReadOnlyStore({"history": "not json{"})

        history = HistoryStore(store)

        assert history.entries == []
        assert history.load() == []

    def test_clear_on_read_only_store_empties_memory(self):
        history = HistoryStore(ReadOnlyStore({"history": '["a"]'}))

        history.clear()

        assert history.entries == []
