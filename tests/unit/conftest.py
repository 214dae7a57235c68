"""Unit test fixtures - sample data."""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def sample_observation_data() -> dict:
    """Valid observation data keyed by data server tag names."""
    return {
        "raw_text": "EDDH 151150Z 27010G20KT 9999 FEW012 SCT025 BKN040 08/05 Q1013 NOSIG",
        "station_id": "EDDH",
        "observation_time": datetime(2024, 1, 15, 11, 50, tzinfo=timezone.utc),
        "latitude": 53.63,
        "longitude": 10.0,
        "temp_c": 8.0,
        "dewpoint_c": 5.0,
        "wind_dir_degrees": 270,
        "wind_speed_kt": 10,
        "wind_gust_kt": 20,
        "visibility_statute_mi": 6.21,
        "altim_in_hg": 29.911417,
        "sea_level_pressure_mb": None,
        "quality_control_flags": {"no_signal": False},
        "wx_string": None,
        "sky_condition": [
            {"sky_cover": "FEW", "cloud_base_ft_agl": 1200},
            {"sky_cover": "SCT", "cloud_base_ft_agl": 2500},
            {"sky_cover": "BKN", "cloud_base_ft_agl": 4000},
        ],
        "flight_category": "VFR",
        "metar_type": "METAR",
        "elevation_m": 16.0,
    }


@pytest.fixture
def minimal_observation_data() -> dict:
    """Minimal valid observation (only required fields)."""
    return {
        "raw_text": "KXYZ 151155Z AUTO 00000KT 10SM CLR M01/M03 A3005",
        "station_id": "KXYZ",
        "observation_time": "2024-01-15T11:55:00Z",
    }
