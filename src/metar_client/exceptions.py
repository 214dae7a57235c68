"""Errors raised while fetching and decoding METAR observations."""


class MetarError(Exception):
    """Base exception for METAR retrieval failures."""


class TransportError(MetarError):
    """The HTTP request failed or returned an error status.

    The underlying ``httpx.HTTPError`` is kept as ``__cause__``.
    """


class DecodeError(MetarError):
    """The response body is not a well-formed data server document."""


class InconsistentCountError(MetarError):
    """Declared ``num_results`` does not match the decoded METAR elements."""

    def __init__(self, declared: int, actual: int) -> None:
        super().__init__("Got inconsistent number of results")
        self.declared = declared
        self.actual = actual


class NoDataError(MetarError):
    """The station has not reported within the lookback window, or is unknown."""

    def __init__(self, station: str) -> None:
        super().__init__("Did not find any data for your station")
        self.station = station
