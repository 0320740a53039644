"""Durable storage backends for diskv."""

from .base import PersistentStore
from .filesystem import FileSystemStore

__all__ = ["PersistentStore", "FileSystemStore"]
