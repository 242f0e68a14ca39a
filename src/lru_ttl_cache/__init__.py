"""In-process LRU cache with optional max-age expiry."""

from .cache import CacheStats, LRUCache
from .config import CacheOptions, build_options, load_cache_options
from .entry import CacheEntry
from .errors import CacheError, ErrorCode, InvalidCacheConfigError, UnsupportedKeyError
from .keys import canonicalize_key
from .recency import RecencyList

__all__ = [
    "CacheEntry",
    "CacheError",
    "CacheOptions",
    "CacheStats",
    "ErrorCode",
    "InvalidCacheConfigError",
    "LRUCache",
    "RecencyList",
    "UnsupportedKeyError",
    "build_options",
    "canonicalize_key",
    "load_cache_options",
]
