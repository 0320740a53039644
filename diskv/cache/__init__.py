"""Cache module for diskv."""

from .bounded import BoundedCache
from .eviction import InsertionOrderEviction

__all__ = ["BoundedCache", "InsertionOrderEviction"]
