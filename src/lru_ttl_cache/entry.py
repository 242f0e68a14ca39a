"""Cache entry stored in both the index and the recency list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class CacheEntry:
    """A resident key/value pair with its recency links.

    ``prev`` and ``next`` are only meaningful while the entry sits in a
    RecencyList. Identity comparison is used so that two entries holding
    equal values never compare equal.
    """

    key: str
    value: Any
    last_updated: float
    prev: Optional[CacheEntry] = field(default=None, repr=False)
    next: Optional[CacheEntry] = field(default=None, repr=False)

    def update(self, value: Any, now: float) -> None:
        """Replace the value and refresh the last-update timestamp."""
        self.value = value
        self.last_updated = now

    def age(self, now: float) -> float:
        return now - self.last_updated

    def unlink(self) -> None:
        self.prev = None
        self.next = None
