"""
Key-Value Store Module

Durable key -> bytes store with a bounded read cache in front of it.

- put(): write-through. The blob is written first, then the cache updated
- get(): read-through. A cache miss reads the blob and repopulates the cache
- delete(): the blob is removed, then the key dropped from the cache

The persistent store is the only source of truth. One store-wide RWLock
guards the cache; writes to different keys are therefore serialized.
"""

import logging
import threading
from collections import Counter
from typing import Any, Dict, Optional

from .cache.bounded import BoundedCache
from .config.settings import Options
from .storage.base import PersistentStore
from .storage.filesystem import FileSystemStore
from .sync.rwlock import RWLock

logger = logging.getLogger(__name__)


class KeyValueStore:
    """
    Embedded key-value store with write-through caching.

    Safe to share between threads. Cache hits only take the lock shared,
    so concurrent hits proceed in parallel; put() and delete() take it
    exclusive and hold it across the persistent write and the cache update.

    Two concurrent misses on the same key may both read the blob and both
    populate the cache. That costs a redundant read but is harmless since
    both populate with what the persistent store returned.

    Usage:
        store = KeyValueStore(Options(base_path="data", cache_size_max=1024))
        store.put("k1", b"value")
        store.get("k1")  # b"value"
        store.delete("k1")

    Attributes:
        options: The construction options
    """

    def __init__(self, options: Options, persistent: Optional[PersistentStore] = None):
        """
        Initialize the store.

        Args:
            options: Root location and cache ceiling
            persistent: Backing store (default FileSystemStore at base_path)

        Raises:
            DiskvError: If the base path cannot be created
        """
        self.options = options
        self._persistent = (
            persistent if persistent is not None else FileSystemStore(options.base_path)
        )
        self._lock = RWLock()
        self._cache = BoundedCache(options.cache_size_max)

        # Bumped by every put/delete.
        self._generation = 0

        # A miss snapshots the generation before reading the persistent
        # store. While any miss is in flight, writes record the generation
        # they ran at per key, and the miss only populates the cache if its
        # key was not written after the snapshot. Guarded by _miss_lock;
        # entries older than every in-flight snapshot are pruned.
        self._miss_lock = threading.Lock()
        self._misses_in_flight: Counter = Counter()
        self._changed_at: Dict[str, int] = {}

    def put(self, key: str, value: bytes) -> None:
        """
        Store a value durably and cache it.

        Values larger than cache_size_max are persisted but not cached.

        Raises:
            TypeError: If value is not bytes-like
            DiskvError: If the persistent write fails; the cache is untouched
        """
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"value must be bytes-like, got {type(value).__name__}")
        value = bytes(value)
        with self._lock.write_locked():
            self._mark_written(key)
            self._persistent.write(key, value)
            self._cache.put(key, value)

    def get(self, key: str) -> Optional[bytes]:
        """
        Retrieve a value.

        Returns:
            The value, or None if the key does not exist

        Raises:
            DiskvError: If the persistent read fails
        """
        with self._lock.read_locked():
            value = self._cache.get(key)
            if value is not None:
                return value
            snapshot = self._begin_miss()

        try:
            value = self._persistent.read(key)
            if value is None:
                return None

            with self._lock.write_locked():
                if self._written_since(key, snapshot):
                    logger.debug(f"skipped caching {key}: written during read")
                else:
                    self._cache.put(key, value)
            return value
        finally:
            self._end_miss(snapshot)

    def delete(self, key: str) -> None:
        """
        Remove a value. Deleting a missing key succeeds.

        Raises:
            DiskvError: If the persistent remove fails; the cache is untouched
        """
        with self._lock.write_locked():
            self._mark_written(key)
            if not self._persistent.remove(key):
                logger.debug(f"delete: {key} was not persisted")
            self._cache.delete(key)

    def _mark_written(self, key: str) -> None:
        """Record a write to `key`. Caller holds the exclusive lock."""
        self._generation += 1
        with self._miss_lock:
            if self._misses_in_flight:
                self._changed_at[key] = self._generation

    def _begin_miss(self) -> int:
        """Register an in-flight miss. Caller holds the lock (any mode)."""
        snapshot = self._generation
        with self._miss_lock:
            self._misses_in_flight[snapshot] += 1
        return snapshot

    def _written_since(self, key: str, snapshot: int) -> bool:
        with self._miss_lock:
            return self._changed_at.get(key, 0) > snapshot

    def _end_miss(self, snapshot: int) -> None:
        with self._miss_lock:
            self._misses_in_flight[snapshot] -= 1
            if self._misses_in_flight[snapshot] <= 0:
                del self._misses_in_flight[snapshot]
            if not self._misses_in_flight:
                self._changed_at.clear()
                return
            oldest = min(self._misses_in_flight)
            self._changed_at = {
                k: gen for k, gen in self._changed_at.items() if gen > oldest
            }

    def cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics (see BoundedCache.get_stats)."""
        with self._lock.read_locked():
            return self._cache.get_stats()

    def __str__(self) -> str:
        with self._lock.read_locked():
            cache = repr(self._cache)
        return f"base path: {self._persistent.location}\nlocked: {self._lock!r} {cache}\n"
