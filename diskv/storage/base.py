"""
Base class for durable blob storage.

A PersistentStore maps string keys to byte blobs and is the source of
truth for KeyValueStore; the cache only mirrors it.
"""

from abc import ABC, abstractmethod
from typing import Optional


class PersistentStore(ABC):
    """Abstract interface for durable blob storage."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Root the blobs are stored under."""
        ...

    @abstractmethod
    def write(self, key: str, data: bytes) -> None:
        """Durably store `data` under `key`, replacing any previous blob."""
        ...

    @abstractmethod
    def read(self, key: str) -> Optional[bytes]:
        """Return the blob for `key`, or None if there is none."""
        ...

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Remove the blob for `key`. Returns False if it was already absent."""
        ...
