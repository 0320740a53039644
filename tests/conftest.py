"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

from typing import Dict, Optional

import pytest

from diskv.cache.bounded import BoundedCache
from diskv.config.settings import Options
from diskv.exceptions import DiskvError
from diskv.storage.base import PersistentStore
from diskv.storage.filesystem import FileSystemStore
from diskv.store import KeyValueStore


# ============================================================================
# Cache Fixtures
# ============================================================================

@pytest.fixture
def cache() -> BoundedCache:
    """Create a BoundedCache with a 10-byte ceiling."""
    return BoundedCache(max_size=10)


# ============================================================================
# Storage Fixtures
# ============================================================================

class RecordingStore(PersistentStore):
    """
    In-memory PersistentStore that counts calls and can be made to fail.

    Set fail_on to "write", "read" or "remove" to raise DiskvError from
    that operation.
    """

    def __init__(self):
        self.blobs: Dict[str, bytes] = {}
        self.reads = 0
        self.writes = 0
        self.fail_on: Optional[str] = None

    @property
    def location(self) -> str:
        return "memory"

    def _maybe_fail(self, op: str) -> None:
        if self.fail_on == op:
            raise DiskvError(PermissionError(13, "Permission denied", op))

    def write(self, key: str, data: bytes) -> None:
        self._maybe_fail("write")
        self.writes += 1
        self.blobs[key] = data

    def read(self, key: str) -> Optional[bytes]:
        self._maybe_fail("read")
        self.reads += 1
        return self.blobs.get(key)

    def remove(self, key: str) -> bool:
        self._maybe_fail("remove")
        return self.blobs.pop(key, None) is not None


@pytest.fixture
def base_path(tmp_path) -> str:
    """Provide a not-yet-existing store root inside a temp directory."""
    return str(tmp_path / "data")


@pytest.fixture
def fs_store(base_path: str) -> FileSystemStore:
    """Create a FileSystemStore rooted at base_path."""
    return FileSystemStore(base_path)


@pytest.fixture
def recording_store() -> RecordingStore:
    """Create an in-memory store that records calls."""
    return RecordingStore()


# ============================================================================
# KeyValueStore Fixtures
# ============================================================================

@pytest.fixture
def store(base_path: str) -> KeyValueStore:
    """Create a filesystem-backed KeyValueStore with a 10-byte cache."""
    return KeyValueStore(Options(base_path=base_path, cache_size_max=10))


@pytest.fixture
def large_store(base_path: str) -> KeyValueStore:
    """Create a filesystem-backed KeyValueStore with a 64KB cache."""
    return KeyValueStore(Options(base_path=base_path, cache_size_max=64 * 1024))


@pytest.fixture
def recorded_kv(recording_store: RecordingStore) -> KeyValueStore:
    """Create a KeyValueStore over the recording store, 10-byte cache."""
    return KeyValueStore(
        Options(base_path="unused", cache_size_max=10),
        persistent=recording_store,
    )


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
