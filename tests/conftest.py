"""Shared test fixtures for all tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "metar"


@pytest.fixture
def sample_station_id() -> str:
    """Sample ICAO station ID for testing."""
    return "EDDH"


@pytest.fixture
def load_fixture():
    """Load a data server XML fixture by file name."""

    def _load(name: str) -> bytes:
        return (FIXTURES_DIR / name).read_bytes()

    return _load
