"""Unit conversions for presenting decoded METAR values."""

INHG_TO_HPA = 33.8638866667
MB_TO_HPA = 0.1
KTS_TO_MS = 0.514444
STATUTE_MILE_TO_KM = 1.60934

# Upper bound (exclusive, knots) of Beaufort forces 0 through 11
BEAUFORT_LIMITS_KT = (1, 4, 7, 11, 16, 22, 28, 34, 41, 48, 56, 64)


def inhg_to_hpa(inhg: float) -> float:
    """Convert inches of mercury to hectopascal."""
    return inhg * INHG_TO_HPA


def mb_to_hpa(mb: float) -> float:
    """Convert millibar to hectopascal."""
    return mb * MB_TO_HPA


def kts_to_ms(kts: float) -> float:
    """Convert knots to meters per second."""
    return kts * KTS_TO_MS


def statute_miles_to_km(sm: float) -> float:
    """Convert statute miles to kilometers."""
    return sm * STATUTE_MILE_TO_KM


def kts_to_beaufort(kts: float) -> int:
    """Convert a wind speed in knots to Beaufort force (0-12).

    Values below 1 kt, negatives included, are force 0.
    """
    for force, limit in enumerate(BEAUFORT_LIMITS_KT):
        if kts < limit:
            return force
    return len(BEAUFORT_LIMITS_KT)
