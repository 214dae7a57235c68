"""METAR observation schemas.

Pydantic models mapping the aviationweather.gov data server XML format.
"""

from .enums import FlightCategory, MetarType, SkyCover
from .observation import Observation, QualityControlFlags, ResponseEnvelope, SkyCondition

__all__ = [
    "FlightCategory",
    "MetarType",
    "Observation",
    "QualityControlFlags",
    "ResponseEnvelope",
    "SkyCondition",
    "SkyCover",
]
