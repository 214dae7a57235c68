"""Observation schema for METAR reports from the aviationweather.gov data server.

Field names are the data server's XML tag names, so a decoded ``<METAR>``
element validates directly into :class:`Observation`. Elements without a
matching field are ignored.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import FlightCategory, MetarType, SkyCover


def _as_list(v: Any) -> Any:
    """Wrap a single decoded element so repeated tags always validate as a list."""
    if v is None:
        return []
    if isinstance(v, dict):
        return [v]
    return v


class QualityControlFlags(BaseModel):
    """Quality control flags describing the reporting station."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    no_signal: bool = False
    corrected: bool = False
    auto: bool = False
    auto_station: bool = False
    maintenance_indicator_on: bool = False
    lightning_sensor_off: bool = False
    freezing_rain_sensor_off: bool = False
    present_weather_sensor_off: bool = False


class SkyCondition(BaseModel):
    """A single reported cloud layer."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    sky_cover: SkyCover
    cloud_base_ft_agl: int | None = None


class Observation(BaseModel):
    """Decoded METAR report for one station at one point in time."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    raw_text: str
    station_id: str
    observation_time: datetime

    # Position
    latitude: float | None = None
    longitude: float | None = None
    elevation_m: float | None = None

    # Temperature (celsius)
    temp_c: float | None = None
    dewpoint_c: float | None = None

    # Wind; 0 degrees is variable direction, 0 degrees and 0 kt is calm
    wind_dir_degrees: int | None = None
    wind_speed_kt: int | None = None
    wind_gust_kt: int | None = None

    # Visibility & pressure
    visibility_statute_mi: float | None = None
    altim_in_hg: float | None = None
    sea_level_pressure_mb: float | None = None

    quality_control_flags: QualityControlFlags = Field(default_factory=QualityControlFlags)
    wx_string: str | None = None
    sky_conditions: list[SkyCondition] = Field(default_factory=list, alias="sky_condition")
    flight_category: FlightCategory | None = None
    metar_type: MetarType | None = None

    @field_validator("observation_time")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Interpret naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @field_validator("wind_dir_degrees", mode="before")
    @classmethod
    def variable_wind_as_zero(cls, v: Any) -> Any:
        """Map variable wind direction (VRB) to 0 degrees."""
        if isinstance(v, str) and v.strip().upper() == "VRB":
            return 0
        return v

    @field_validator("visibility_statute_mi", mode="before")
    @classmethod
    def strip_greater_than(cls, v: Any) -> Any:
        """Decode open-ended visibilities such as ``10+`` to their numeric part."""
        if isinstance(v, str):
            return v.strip().rstrip("+")
        return v

    @field_validator("sky_conditions", mode="before")
    @classmethod
    def sky_conditions_as_list(cls, v: Any) -> Any:
        return _as_list(v)

    @property
    def sky_condition(self) -> SkyCondition | None:
        """Last reported sky condition layer."""
        return self.sky_conditions[-1] if self.sky_conditions else None

    @property
    def sky_cover(self) -> SkyCover | None:
        """Sky cover of the last reported layer."""
        condition = self.sky_condition
        return condition.sky_cover if condition else None


class ResponseEnvelope(BaseModel):
    """Contents of the ``<data>`` element of a data server response."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    num_results: int = 0
    observations: list[Observation] = Field(default_factory=list, alias="METAR")

    @field_validator("observations", mode="before")
    @classmethod
    def observations_as_list(cls, v: Any) -> Any:
        return _as_list(v)
