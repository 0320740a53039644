"""Synchronization primitives for diskv."""

from .rwlock import RWLock

__all__ = ["RWLock"]
