"""
diskv Configuration Settings

Options configure a single KeyValueStore. Settings hold process-level
defaults read from the environment and are only used by the demo CLI.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Options:
    """
    Construction options for a KeyValueStore.

    Attributes:
        base_path: Root directory for persisted values (created if absent)
        cache_size_max: Cache ceiling in bytes; no default, the caller picks
            a value consistent with expected value sizes
    """

    base_path: str
    cache_size_max: int

    def __post_init__(self):
        if not self.base_path or not self.base_path.strip():
            raise ValueError("base_path cannot be empty")
        if self.cache_size_max < 0:
            raise ValueError(
                f"cache_size_max must be >= 0, got {self.cache_size_max}"
            )


@dataclass
class Settings:
    """Demo process settings."""

    # Storage settings
    BASE_PATH: str = os.environ.get("DISKV_BASE_PATH", "data")
    CACHE_SIZE_MAX: int = int(os.environ.get("DISKV_CACHE_SIZE_MAX", "1024"))

    # Worker settings
    WORKERS: int = int(os.environ.get("DISKV_WORKERS", "2"))
    KEYS_PER_WORKER: int = int(os.environ.get("DISKV_KEYS_PER_WORKER", "10"))

    # Logging settings
    DEBUG: bool = os.environ.get("DISKV_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("DISKV_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
