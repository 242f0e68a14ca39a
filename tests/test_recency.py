"""Tests for recency list link maintenance."""

from __future__ import annotations

from lru_ttl_cache.entry import CacheEntry
from lru_ttl_cache.recency import RecencyList


def _entry(key: str) -> CacheEntry:
    return CacheEntry(key=key, value=key, last_updated=0.0)


def _build(*keys: str) -> tuple[RecencyList, dict[str, CacheEntry]]:
    recency = RecencyList()
    entries = {key: _entry(key) for key in keys}
    for key in reversed(keys):
        recency.insert_at_head(entries[key])
    return recency, entries


def _keys(recency: RecencyList) -> list[str]:
    return [entry.key for entry in recency]


def test_insert_into_empty_list_sets_head_and_tail() -> None:
    recency = RecencyList()
    entry = _entry("a")
    recency.insert_at_head(entry)

    assert recency.head is entry
    assert recency.tail is entry
    assert entry.prev is None
    assert entry.next is None
    assert len(recency) == 1


def test_insert_at_head_links_previous_head() -> None:
    recency, entries = _build("a", "b")

    assert _keys(recency) == ["a", "b"]
    assert entries["a"].next is entries["b"]
    assert entries["b"].prev is entries["a"]
    assert recency.tail is entries["b"]


def test_detach_head() -> None:
    recency, entries = _build("a", "b", "c")
    recency.detach(entries["a"])

    assert _keys(recency) == ["b", "c"]
    assert recency.head is entries["b"]
    assert entries["b"].prev is None
    assert len(recency) == 2


def test_detach_tail() -> None:
    recency, entries = _build("a", "b", "c")
    recency.detach(entries["c"])

    assert _keys(recency) == ["a", "b"]
    assert recency.tail is entries["b"]
    assert entries["b"].next is None


def test_detach_interior() -> None:
    recency, entries = _build("a", "b", "c")
    recency.detach(entries["b"])

    assert _keys(recency) == ["a", "c"]
    assert entries["a"].next is entries["c"]
    assert entries["c"].prev is entries["a"]


def test_detach_only_entry_empties_list() -> None:
    recency, entries = _build("a")
    recency.detach(entries["a"])

    assert recency.head is None
    assert recency.tail is None
    assert len(recency) == 0
    assert list(recency) == []


def test_detach_leaves_entry_links_for_caller() -> None:
    recency, entries = _build("a", "b", "c")
    recency.detach(entries["b"])

    assert entries["b"].prev is entries["a"]
    assert entries["b"].next is entries["c"]


def test_detach_then_reinsert_moves_to_head() -> None:
    recency, entries = _build("a", "b", "c")
    recency.insert_at_head(recency.detach(entries["c"]))

    assert _keys(recency) == ["c", "a", "b"]
    assert recency.tail is entries["b"]
    assert entries["b"].next is None
    assert len(recency) == 3


def test_clear_unlinks_every_entry() -> None:
    recency, entries = _build("a", "b", "c")
    recency.clear()

    assert len(recency) == 0
    assert recency.head is None
    assert all(entry.prev is None and entry.next is None for entry in entries.values())


def test_entry_update_refreshes_timestamp() -> None:
    entry = _entry("a")
    entry.update("new", now=42.0)

    assert entry.value == "new"
    assert entry.last_updated == 42.0
    assert entry.age(50.0) == 8.0
