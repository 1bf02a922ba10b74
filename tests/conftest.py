"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

from pathlib import Path

import pytest

from kv.config.settings import settings
from kv.protocol.parser import CommandParser
from kv.store.file_store import FileStore


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path of a store file that does not exist yet."""
    return tmp_path / "kv.txt"


@pytest.fixture
def store(store_path: Path) -> FileStore:
    """Create a FileStore backed by a fresh temporary file."""
    return FileStore(store_path)


@pytest.fixture
def seeded_store(store: FileStore) -> FileStore:
    """Create a FileStore already holding three pairs."""
    store.set("a", "1")
    store.set("b", "2")
    store.set("c", "3")
    return store


# ============================================================================
# Parser Fixtures
# ============================================================================

@pytest.fixture
def parser() -> CommandParser:
    """Create a CommandParser instance."""
    return CommandParser()


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path: Path):
    """Keep tests away from the real store file and debug settings."""
    monkeypatch.setattr(settings, "STORE_PATH", tmp_path / "default-store.txt")
    monkeypatch.setattr(settings, "DEBUG", False)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that run the full command line"
    )
