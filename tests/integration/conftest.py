"""Integration test fixtures - requires network access to aviationweather.gov."""

import os

import pytest


@pytest.fixture(autouse=True, scope="session")
def require_live_tests() -> None:
    """Skip unless live data server tests are enabled."""
    if os.environ.get("METAR_LIVE_TESTS") != "1":
        pytest.skip("set METAR_LIVE_TESTS=1 to call the live data server")
