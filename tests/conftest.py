"""
Pytest configuration and shared fixtures for AppReferenceHub tests.

Provides in-memory and file-backed catalogs, a deterministic clock and a
temporary home directory.
"""

import itertools
import os
import pytest
from pathlib import Path
from typing import Generator
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============ Environment Fixtures ============

@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch) -> Generator[Path, None, None]:
    """Provide a temporary home directory for tests."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("REFHUB_DATA_DIR", raising=False)
    monkeypatch.delenv("REFHUB_CONFIG_DIR", raising=False)

    (tmp_path / ".config/refhub").mkdir(parents=True)
    (tmp_path / ".local/share/refhub").mkdir(parents=True)

    yield tmp_path


@pytest.fixture
def hub_config(tmp_path: Path):
    """Configuration rooted in a temporary directory."""
    from common.config import HubConfig

    return HubConfig(
        data_dir=tmp_path / "data",
        config_dir=tmp_path / "config",
    )


# ============ Catalog Fixtures ============

@pytest.fixture
def fixed_clock():
    """Clock returning increasing, predictable createdAt stamps."""
    counter = itertools.count(1)

    def clock() -> str:
        return f"2024-01-01T00:00:{next(counter):02d}.000Z"

    return clock


@pytest.fixture
def memory_storage():
    """Empty in-memory storage slot."""
    from catalog.storage import MemoryStorage

    return MemoryStorage()


@pytest.fixture
def catalog(memory_storage, fixed_clock):
    """Seeded catalog backed by memory storage."""
    from catalog.app_catalog import ApplicationCatalog

    cat = ApplicationCatalog(memory_storage, clock=fixed_clock)
    cat.initialize()
    return cat


@pytest.fixture
def file_catalog(tmp_path: Path):
    """Seeded catalog backed by a JSON file."""
    from catalog.app_catalog import ApplicationCatalog
    from catalog.storage import JsonFileStorage

    cat = ApplicationCatalog(JsonFileStorage(tmp_path / "data"))
    cat.initialize()
    return cat


@pytest.fixture
def sample_application():
    """Create a sample Application for testing."""
    from catalog.models import Application

    return Application(
        id="test-app",
        name="Test Application",
        description="A test application for unit tests",
        link="https://example.com/test",
        image_url="https://example.com/test.png",
        created_at="2024-01-01T00:00:00.000Z",
    )


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """Small PNG file (the 8-byte signature is enough for encoding)."""
    path = tmp_path / "logo.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n")
    return path


# ============ Marker Configuration ============

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "unit: fast unit tests with no external deps"
    )
    config.addinivalue_line(
        "markers", "integration: tests touching the filesystem end to end"
    )


@pytest.fixture(autouse=True)
def _no_stray_environment(monkeypatch):
    """Keep a developer's REFHUB_* variables out of the tests."""
    for name in list(os.environ):
        if name.startswith("REFHUB_"):
            monkeypatch.delenv(name, raising=False)
