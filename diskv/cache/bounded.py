"""
Bounded Cache Module

In-memory key -> bytes mapping with a byte-size ceiling.

Size accounting:
- Only value lengths count toward the size; keys are free
- current_size always equals the sum of cached value lengths
- current_size never exceeds max_size

This class is NOT thread-safe. KeyValueStore guards it with an RWLock:
get() under the shared lock, put()/delete() under the exclusive lock.
"""

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import CacheInvariantError
from .eviction import InsertionOrderEviction

logger = logging.getLogger(__name__)


class BoundedCache:
    """
    Size-bounded cache with on-demand eviction.

    Values larger than max_size are never cached; put() ignores them
    rather than raising. When an insert would cross the ceiling, the
    eviction policy picks entries to drop until enough bytes are free.

    Usage:
        cache = BoundedCache(max_size=10)
        cache.put("k1", b"0123456")
        cache.get("k1")  # b"0123456"

    Attributes:
        max_size: Ceiling in bytes
    """

    def __init__(self, max_size: int, eviction: Optional[Any] = None):
        """
        Initialize an empty cache.

        Args:
            max_size: Ceiling in bytes (must not be negative)
            eviction: Policy with a select_victims(entries, needed) method
                (default InsertionOrderEviction)

        Raises:
            ValueError: If max_size is negative
        """
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._current_size = 0
        self._entries: Dict[str, bytes] = {}
        self._eviction = eviction if eviction is not None else InsertionOrderEviction()

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def current_size(self) -> int:
        """Sum of the byte lengths of all cached values."""
        return self._current_size

    def put(self, key: str, value: bytes) -> bool:
        """
        Insert or replace a cached value, evicting if needed.

        Args:
            key: The key to cache
            value: The value bytes

        Returns:
            True if the value is now cached, False if it was too large
            (any previous entry for the key is then left as it was)

        Raises:
            TypeError: If value is not bytes-like
            CacheInvariantError: If eviction could not free enough space
        """
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"value must be bytes-like, got {type(value).__name__}")
        value = bytes(value)
        val_len = len(value)

        if val_len > self._max_size:
            logger.debug(
                f"cache max size: {self._max_size}, val size: {val_len}, ignored"
            )
            return False

        self.delete(key)

        needed = self._current_size + val_len - self._max_size
        if needed > 0:
            self._evict(needed)
            if self._current_size + val_len > self._max_size:
                raise CacheInvariantError(val_len, self._current_size, self._max_size)

        self._entries[key] = value
        self._current_size += val_len
        logger.debug(f"cached {key}. cache_size: {self._current_size}")
        return True

    def get(self, key: str) -> Optional[bytes]:
        """
        Look up a cached value.

        Returns:
            The value on a hit, None on a miss. Values are immutable bytes,
            so callers cannot alter the cached copy.
        """
        value = self._entries.get(key)
        if value is None:
            logger.debug(f"cache miss. key: {key}")
        else:
            logger.debug(f"cache hit. key: {key}")
        return value

    def delete(self, key: str) -> bool:
        """
        Drop a cached value.

        Returns:
            True if the key was cached, False otherwise
        """
        value = self._entries.pop(key, None)
        if value is None:
            return False
        self._current_size -= len(value)
        return True

    def _evict(self, needed: int) -> None:
        """Drop the entries the policy selects to free `needed` bytes."""
        victims = self._eviction.select_victims(self._entries, needed)
        freed = 0
        for key in victims:
            value = self._entries.pop(key, None)
            if value is None:
                continue
            self._current_size -= len(value)
            freed += len(value)
            logger.debug(f"evicted {key} ({len(value)} bytes)")
        logger.debug(f"eviction freed {freed} of {needed} bytes needed")

    def contains(self, key: str) -> bool:
        return key in self._entries

    def size(self) -> int:
        """Number of cached entries."""
        return len(self._entries)

    def keys(self) -> List[str]:
        """Cached keys in eviction order (next victim first)."""
        return list(self._entries.keys())

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()
        self._current_size = 0

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the cache.

        Returns:
            Dictionary containing:
            - entries: Number of cached keys
            - current_size: Cached bytes
            - max_size: Ceiling in bytes
            - utilization: current_size as a fraction of max_size
        """
        return {
            "entries": len(self._entries),
            "current_size": self._current_size,
            "max_size": self._max_size,
            "utilization": self._current_size / self._max_size if self._max_size > 0 else 0,
        }

    def __repr__(self) -> str:
        return (
            f"BoundedCache(entries={len(self._entries)}, "
            f"current_size={self._current_size}, max_size={self._max_size})"
        )
