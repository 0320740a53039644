"""Configuration for diskv."""

from .settings import Options, Settings, settings

__all__ = ["Options", "Settings", "settings"]
