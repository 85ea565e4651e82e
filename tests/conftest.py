"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from fastapi.testclient import TestClient

from catalog.app import create_app
from catalog.config import Settings
from catalog.records import SAMPLE_RECORDS, Record, RecordStore


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        host="127.0.0.1",
        port=8000,
        debug=True,
    )


@pytest.fixture
def records() -> tuple[Record, ...]:
    """Sample catalog records."""
    return SAMPLE_RECORDS


@pytest.fixture
def store(records: tuple[Record, ...]) -> RecordStore:
    """Record store seeded with the sample catalog."""
    return RecordStore(records)


@pytest.fixture
def client(settings: Settings, store: RecordStore) -> TestClient:
    """Create test client with configured app."""
    app = create_app(settings, store=store)
    return TestClient(app)
