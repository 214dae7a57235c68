"""aviationweather.gov data server client for current METAR observations."""

import logging
import xml.etree.ElementTree as ET
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import MetarConfig
from ..exceptions import (
    DecodeError,
    InconsistentCountError,
    NoDataError,
    TransportError,
)
from ..schemas import Observation, ResponseEnvelope

logger = logging.getLogger(__name__)

# Lookback window of the most recent METAR query, in hours
HOURS_BEFORE_NOW = 2


def element_to_dict(element: ET.Element) -> dict[str, Any]:
    """Flatten an XML element into a mapping pydantic can validate.

    Attributes and child elements become keys. Leaf children map to their
    stripped text, children with attributes or children of their own map to
    nested dicts, and repeated tags collect into a list. Empty leaves are
    dropped so schema defaults apply.
    """
    result: dict[str, Any] = dict(element.attrib)

    for child in element:
        if len(child) or child.attrib:
            value: Any = element_to_dict(child)
        else:
            text = (child.text or "").strip()
            if not text:
                continue
            value = text

        if child.tag not in result:
            result[child.tag] = value
        elif isinstance(result[child.tag], list):
            result[child.tag].append(value)
        else:
            result[child.tag] = [result[child.tag], value]

    return result


def parse_response(content: bytes | str) -> ResponseEnvelope:
    """Decode a data server XML document into a response envelope.

    A response without a ``<data>`` element, as the data server sends for
    unknown stations, decodes to an empty envelope.

    Raises:
        DecodeError: The body is not XML, is not a ``<response>`` document, or
            its METAR elements do not match the observation schema.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise DecodeError(f"Malformed XML response: {e}") from e

    if root.tag != "response":
        raise DecodeError(f"Unexpected root element <{root.tag}>")

    for tag in ("errors", "warnings"):
        for message in root.iterfind(f"{tag}/*"):
            if message.text and message.text.strip():
                logger.warning("Data server %s: %s", tag[:-1], message.text.strip())

    data = root.find("data")
    if data is None:
        return ResponseEnvelope(num_results=0)

    try:
        return ResponseEnvelope.model_validate(element_to_dict(data))
    except ValidationError as e:
        raise DecodeError(f"Invalid METAR data: {e}") from e


class AviationWeatherClient:
    """HTTP client for fetching METARs from the aviationweather.gov data server."""

    def __init__(
        self,
        config: MetarConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Data server configuration settings.
            http_client: Optional HTTP client to execute requests with. It is
                shared with the caller and never closed by this client.
        """
        self.config = config or MetarConfig()
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @property
    def http_client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.Client(
                timeout=self.config.timeout_seconds,
                follow_redirects=True,
                headers={"User-Agent": self.config.user_agent},
            )
        return self._http_client

    def close(self) -> None:
        """Close HTTP client if it was created here."""
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> "AviationWeatherClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def build_params(self, station: str) -> dict[str, str | int]:
        """Build the query for the most recent XML METAR of a station.

        The station code is passed through as a single value; the data server
        decides whether it is valid.
        """
        return {
            "requestType": "retrieve",
            "dataSource": "metars",
            "format": "xml",
            "stationString": station,
            "hoursBeforeNow": HOURS_BEFORE_NOW,
            "mostRecent": "true",
        }

    def fetch_current_station_weather(self, station: str) -> Observation:
        """Fetch the most recent METAR of a station reported within the lookback window.

        Args:
            station: Station identifier (e.g., "EDDH").

        Returns:
            The first observation returned by the data server.

        Raises:
            TransportError: The request failed or returned an error status.
            DecodeError: The response body could not be decoded.
            InconsistentCountError: ``num_results`` disagrees with the METARs returned.
            NoDataError: No METAR was returned for the station.
        """
        logger.debug("Fetching METAR for %s from %s", station, self.config.base_url)

        try:
            response = self.http_client.get(
                self.config.base_url, params=self.build_params(station)
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to fetch METAR for {station}: {e}") from e

        envelope = parse_response(response.content)
        logger.debug(
            "Decoded %d METAR(s) for %s (declared %d)",
            len(envelope.observations),
            station,
            envelope.num_results,
        )

        if envelope.num_results != len(envelope.observations):
            raise InconsistentCountError(envelope.num_results, len(envelope.observations))

        if not envelope.observations:
            raise NoDataError(station)

        return envelope.observations[0]


def fetch_current_station_weather(
    station: str,
    http_client: httpx.Client | None = None,
    config: MetarConfig | None = None,
) -> Observation:
    """Fetch the most recent METAR of a station with a one-shot client.

    See :meth:`AviationWeatherClient.fetch_current_station_weather`.
    """
    with AviationWeatherClient(config=config, http_client=http_client) as client:
        return client.fetch_current_station_weather(station)

