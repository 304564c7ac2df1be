"""Tests for commander history helpers."""

from __future__ import annotations

from commander.history import HistoryStore


def test_history_store_loads_existing_file(tmp_path):
    path = tmp_path / "history.txt"
    path.write_text("one\ntwo\n", encoding="utf-8")
    store = HistoryStore(str(path), limit=5)
    assert store.snapshot() == ["one", "two"]
    store.append("three")
    assert store.snapshot()[-1] == "three"
    assert "three" in path.read_text(encoding="utf-8")


def test_history_store_limits_entries(tmp_path):
    path = tmp_path / "history.txt"
    store = HistoryStore(str(path), limit=3)
    for idx in range(5):
        store.append(f"cmd{idx}")
    assert store.snapshot() == ["cmd2", "cmd3", "cmd4"]
    text = path.read_text(encoding="utf-8").strip().splitlines()
    assert text == ["cmd2", "cmd3", "cmd4"]


def test_history_store_ignores_duplicate_adjacent_and_blank(tmp_path):
    store = HistoryStore(tmp_path / "history.txt", limit=10)
    assert store.append("test")
    assert not store.append("test ")
    assert not store.append("   ")
    assert store.snapshot() == ["test"]


def test_history_store_without_path_stays_in_memory():
    store = HistoryStore(None)
    store.extend(["a", "b"])
    assert len(store) == 2
    store.clear()
    assert store.snapshot() == []


def test_history_store_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "dir" / "history.txt"
    store = HistoryStore(path)
    store.append("help")
    assert path.read_text(encoding="utf-8") == "help\n"
    store.clear()
    assert path.read_text(encoding="utf-8") == ""
