"""
diskv: Embedded Disk-Backed Key-Value Store

Values are persisted as files under a base directory, with a size-bounded
in-memory cache for repeated reads. Safe to share between threads.
"""

from .config.settings import Options
from .exceptions import CacheInvariantError, DiskvError
from .store import KeyValueStore

__version__ = "1.0.0"

__all__ = ["KeyValueStore", "Options", "DiskvError", "CacheInvariantError"]
