"""Enums for METAR observation schemas."""

from enum import Enum


class SkyCover(str, Enum):
    """Sky cover reported for a cloud layer, by increasing coverage.

    Up to four layers can be reported. OVX is used when vertical
    visibility is reported instead of a cloud base.
    """

    SKC = "SKC"  # Sky clear, human generated report
    CLR = "CLR"  # No clouds below 12,000 ft, automated station
    NCD = "NCD"  # No cloud detected, automated station outside North America
    NSC = "NSC"  # No significant cloud below 5,000 ft and no TCU or CB
    CAVOK = "CAVOK"  # Ceiling and visibility OK
    FEW = "FEW"  # 1-2 oktas
    SCT = "SCT"  # 3-4 oktas
    BKN = "BKN"  # 5-7 oktas
    OVC = "OVC"  # 8 oktas
    OVX = "OVX"  # Sky obscured


class FlightCategory(str, Enum):
    """Flight category derived upstream from ceiling and visibility."""

    VFR = "VFR"
    MVFR = "MVFR"
    IFR = "IFR"
    LIFR = "LIFR"

    @property
    def description(self) -> str:
        """Ceiling and visibility thresholds of this category."""
        return _FLIGHT_CATEGORY_DESCRIPTIONS[self]


_FLIGHT_CATEGORY_DESCRIPTIONS = {
    FlightCategory.VFR: "Visual Flight Rules (ceiling above 3,000 ft AGL and visibility above 5 miles)",
    FlightCategory.MVFR: "Marginal Visual Flight Rules (ceiling 1,000 to 3,000 ft AGL and/or visibility 3 to 5 miles)",
    FlightCategory.IFR: "Instrument Flight Rules (ceiling 500 to below 1,000 ft AGL and/or visibility 1 to below 3 miles)",
    FlightCategory.LIFR: "Low Instrument Flight Rules (ceiling below 500 ft AGL and/or visibility below 1 mile)",
}


class MetarType(str, Enum):
    """Report type: routine observation or special (unscheduled) report."""

    METAR = "METAR"
    SPECI = "SPECI"
