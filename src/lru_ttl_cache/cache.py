"""Size-bounded LRU cache with optional max-age expiry."""

from __future__ import annotations

from dataclasses import dataclass, replace
from time import monotonic
from typing import Any, Callable, Optional

import structlog

from .config import CacheOptions, build_options
from .constants import DEFAULT_MAX_AGE_SECONDS, DEFAULT_MAX_SIZE
from .entry import CacheEntry
from .keys import canonicalize_key
from .recency import RecencyList

logger = structlog.get_logger(__name__)

TimeFn = Callable[[], float]


@dataclass
class CacheStats:
    """Counters describing cache behavior since construction or clear()."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        if lookups == 0:
            return 0.0
        return self.hits / lookups


class LRUCache:
    """Least-recently-used cache with lazy max-age expiry.

    A dict index gives O(1) lookup by canonical key and a doubly linked
    RecencyList keeps entries ordered from most to least recently used.
    Both structures hold the same CacheEntry instances.

    Not safe for concurrent mutation; callers that share an instance across
    threads must synchronize externally.

    Args:
        max_size: Maximum number of resident entries (>= 1)
        max_age_seconds: Seconds after the last put before an entry is
            treated as absent (> 0, unbounded by default)
        time_fn: Clock returning seconds; defaults to time.monotonic

    Raises:
        InvalidCacheConfigError: If either limit is not positive
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        max_age_seconds: float = DEFAULT_MAX_AGE_SECONDS,
        *,
        time_fn: Optional[TimeFn] = None,
    ) -> None:
        self._options = build_options(max_size=max_size, max_age_seconds=max_age_seconds)
        self._time_fn = time_fn if time_fn is not None else monotonic
        self._index: dict[str, CacheEntry] = {}
        self._recency = RecencyList()
        self._stats = CacheStats()
        logger.debug(
            "lru_cache_configured",
            max_size=self._options.max_size,
            max_age_seconds=self._options.max_age_seconds,
        )

    @classmethod
    def from_options(
        cls,
        options: CacheOptions,
        *,
        time_fn: Optional[TimeFn] = None,
    ) -> LRUCache:
        """Build a cache from a validated CacheOptions object."""
        return cls(
            max_size=options.max_size,
            max_age_seconds=options.max_age_seconds,
            time_fn=time_fn,
        )

    @property
    def max_size(self) -> int:
        return self._options.max_size

    @property
    def max_age_seconds(self) -> float:
        return self._options.max_age_seconds

    @property
    def stats(self) -> CacheStats:
        """Snapshot of the hit/miss/eviction counters."""
        return replace(self._stats)

    def fetch(self, key: Any, default: Any = None) -> Any:
        """Return the cached value for ``key``, or ``default`` on a miss.

        A hit marks the entry most recently used. An entry whose age has
        reached max_age_seconds is dropped and reported as a miss.
        """
        canonical = canonicalize_key(key)
        entry = self._index.get(canonical)
        if entry is None:
            self._stats.misses += 1
            return default

        self._recency.detach(entry)
        age = entry.age(self._time_fn())
        if age >= self._options.max_age_seconds:
            del self._index[canonical]
            entry.unlink()
            self._stats.expirations += 1
            self._stats.misses += 1
            logger.debug("lru_cache_expired", key=canonical, age_seconds=age)
            return default

        self._recency.insert_at_head(entry)
        self._stats.hits += 1
        return entry.value

    def put(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key`` as the most recently used entry.

        Overwrites keep the existing entry and refresh its age. Inserting a
        new key into a full cache evicts the least recently used entry.
        """
        canonical = canonicalize_key(key)
        now = self._time_fn()
        entry = self._index.get(canonical)
        if entry is not None:
            entry.update(value, now)
            self._recency.detach(entry)
            self._recency.insert_at_head(entry)
            return

        if len(self._index) >= self._options.max_size:
            self._evict_tail()
        entry = CacheEntry(key=canonical, value=value, last_updated=now)
        self._recency.insert_at_head(entry)
        self._index[canonical] = entry

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        self._recency.clear()
        self._index.clear()
        self._stats = CacheStats()

    def _evict_tail(self) -> None:
        tail = self._recency.tail
        if tail is None:
            return
        del self._index[tail.key]
        self._recency.detach(tail)
        tail.unlink()
        self._stats.evictions += 1
        logger.debug("lru_cache_evicted", key=tail.key, size=len(self._index))

    def __contains__(self, key: Any) -> bool:
        """Presence check that neither refreshes recency nor expires entries."""
        entry = self._index.get(canonicalize_key(key))
        if entry is None:
            return False
        return entry.age(self._time_fn()) < self._options.max_age_seconds

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(max_size={self.max_size}, "
            f"max_age_seconds={self.max_age_seconds}, size={len(self)})"
        )
