"""
kv Configuration Settings

This module contains all configuration constants for the kv command-line
store. Every value can be overridden from the environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


def default_store_path() -> Path:
    """
    Resolve the location of the store file.

    KV_STORE_PATH wins when set. Otherwise the file lives in
    $XDG_DATA_HOME when that directory exists, falling back to the home
    directory.
    """
    override = os.environ.get("KV_STORE_PATH")
    if override:
        return Path(override).expanduser()

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home and Path(xdg_data_home).is_dir():
        return Path(xdg_data_home) / "kv.txt"

    return Path.home() / ".kv.txt"


@dataclass
class Settings:
    """Store configuration settings."""

    # Storage settings
    STORE_PATH: Path = field(default_factory=default_store_path)
    ENCODING: str = "utf-8"
    SEPARATOR: str = ":"

    # Logging settings
    DEBUG: bool = os.environ.get("KV_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("KV_LOG_LEVEL", "WARNING")


# Global settings instance
settings = Settings()
