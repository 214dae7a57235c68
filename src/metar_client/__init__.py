"""METAR client - current aviation weather observations from aviationweather.gov.

This package fetches the most recent METAR for a station from the
aviationweather.gov data server, decodes it into a typed record and
converts its values to other units:

- clients: data server client and one-shot fetch function
- schemas: Observation record, sky cover and flight category enums
- conversions: pressure, speed, distance and Beaufort conversions

Usage:
    from metar_client import fetch_current_station_weather
    from metar_client.conversions import kts_to_beaufort
"""

__version__ = "0.1.0"

from .clients import AviationWeatherClient, fetch_current_station_weather
from .config import MetarConfig, Settings, get_settings
from .exceptions import (
    DecodeError,
    InconsistentCountError,
    MetarError,
    NoDataError,
    TransportError,
)
from .schemas import FlightCategory, MetarType, Observation, SkyCover

__all__ = [
    "AviationWeatherClient",
    "DecodeError",
    "FlightCategory",
    "InconsistentCountError",
    "MetarConfig",
    "MetarError",
    "MetarType",
    "NoDataError",
    "Observation",
    "Settings",
    "SkyCover",
    "TransportError",
    "fetch_current_station_weather",
    "get_settings",
]
