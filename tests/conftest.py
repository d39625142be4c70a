"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest

from easyconfig.cache import MemoryCache
from easyconfig.config import ConfigStore


@pytest.fixture(autouse=True)
def isolated_cache():
    """Start every test with an empty process-wide cache and no shared store."""
    MemoryCache().clear()
    ConfigStore.reset_instance()
    yield
    MemoryCache().clear()
    ConfigStore.reset_instance()


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a file under tmp_path and return its path as a string."""

    def _write(name: str, content: str) -> str:
        path: Path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
