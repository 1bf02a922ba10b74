"""Configuration module for kv."""

from .settings import Settings, default_store_path, settings

__all__ = ["Settings", "default_store_path", "settings"]
