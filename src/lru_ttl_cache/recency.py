"""Doubly linked recency list (head = most recently used)."""

from __future__ import annotations

from typing import Iterator, Optional

from .entry import CacheEntry


class RecencyList:
    """Most-recently-used to least-recently-used ordering of entries.

    Both structural operations are O(1) and never traverse the list.
    """

    def __init__(self) -> None:
        self.head: Optional[CacheEntry] = None
        self.tail: Optional[CacheEntry] = None
        self._length = 0

    def detach(self, entry: CacheEntry) -> CacheEntry:
        """Remove a resident entry from its current position.

        The entry's own links are left as they were; callers either
        reinsert it (which reassigns them) or unlink it.
        """
        if entry.prev is not None:
            entry.prev.next = entry.next
        else:
            self.head = entry.next
        if entry.next is not None:
            entry.next.prev = entry.prev
        else:
            self.tail = entry.prev
        self._length -= 1
        return entry

    def insert_at_head(self, entry: CacheEntry) -> None:
        """Make ``entry`` the most recently used entry."""
        entry.prev = None
        entry.next = self.head
        if self.head is not None:
            self.head.prev = entry
        self.head = entry
        if self.tail is None:
            self.tail = entry
        self._length += 1

    def clear(self) -> None:
        node = self.head
        while node is not None:
            following = node.next
            node.unlink()
            node = following
        self.head = None
        self.tail = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[CacheEntry]:
        node = self.head
        while node is not None:
            yield node
            node = node.next
