"""HTTP clients for aviation weather data sources."""

from .aviationweather import AviationWeatherClient, fetch_current_station_weather, parse_response

__all__ = [
    "AviationWeatherClient",
    "fetch_current_station_weather",
    "parse_response",
]
