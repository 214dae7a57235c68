"""Command line entry point for fetching the current METAR of a station."""

import argparse
import logging
import sys
from typing import NoReturn

from . import __version__
from .clients import fetch_current_station_weather
from .config import get_settings
from .conversions import inhg_to_hpa, kts_to_beaufort, kts_to_ms, statute_miles_to_km
from .exceptions import MetarError
from .schemas import Observation

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Reduce noise from httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def format_observation(obs: Observation) -> str:
    """Render an observation as text, with converted units alongside."""
    lines = [
        f"Station:          {obs.station_id}",
        f"Observed:         {obs.observation_time.isoformat()}",
        f"Report:           {obs.raw_text}",
    ]
    if obs.metar_type is not None:
        lines.append(f"Type:             {obs.metar_type.value}")
    if obs.temp_c is not None:
        temperature = f"{obs.temp_c:.1f} °C"
        if obs.dewpoint_c is not None:
            temperature += f" (dewpoint {obs.dewpoint_c:.1f} °C)"
        lines.append(f"Temperature:      {temperature}")
    if obs.wind_speed_kt is not None:
        if obs.wind_speed_kt == 0 and not obs.wind_dir_degrees:
            wind = "calm"
        else:
            direction = f"{obs.wind_dir_degrees:03d}°" if obs.wind_dir_degrees else "variable"
            wind = (
                f"{direction} at {obs.wind_speed_kt} kt "
                f"({kts_to_ms(obs.wind_speed_kt):.1f} m/s, "
                f"Beaufort {kts_to_beaufort(obs.wind_speed_kt)})"
            )
        if obs.wind_gust_kt:
            wind += f", gusts {obs.wind_gust_kt} kt ({kts_to_ms(obs.wind_gust_kt):.1f} m/s)"
        lines.append(f"Wind:             {wind}")
    if obs.visibility_statute_mi is not None:
        lines.append(
            f"Visibility:       {obs.visibility_statute_mi:g} SM "
            f"({statute_miles_to_km(obs.visibility_statute_mi):.1f} km)"
        )
    if obs.altim_in_hg is not None:
        lines.append(
            f"Altimeter:        {obs.altim_in_hg:.2f} inHg ({inhg_to_hpa(obs.altim_in_hg):.1f} hPa)"
        )
    if obs.sea_level_pressure_mb is not None:
        lines.append(f"Sea-level press.: {obs.sea_level_pressure_mb:.1f} mb")
    if obs.wx_string:
        lines.append(f"Weather:          {obs.wx_string}")
    if obs.sky_conditions:
        layers = []
        for condition in obs.sky_conditions:
            layer = condition.sky_cover.value
            if condition.cloud_base_ft_agl is not None:
                layer += f" {condition.cloud_base_ft_agl} ft"
            layers.append(layer)
        lines.append(f"Sky:              {', '.join(layers)}")
    if obs.flight_category is not None:
        lines.append(f"Flight category:  {obs.flight_category.value}")
    if obs.quality_control_flags.no_signal:
        lines.append("Quality control:  no signal from station")
    return "\n".join(lines)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Fetch the current METAR of a station from aviationweather.gov",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Current weather at Hamburg
  metar-client EDDH

  # Run with debug logging
  metar-client EDDH --log-level DEBUG

Environment Variables:
  METAR_BASE_URL           Data server endpoint
  METAR_TIMEOUT_SECONDS    HTTP timeout (default: 30)
        """,
    )

    parser.add_argument(
        "station",
        help="Station identifier (e.g., EDDH)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    args = parse_args(argv)
    settings = get_settings()

    setup_logging(args.log_level or settings.log_level)

    try:
        obs = fetch_current_station_weather(args.station, config=settings.metar)
    except MetarError as e:
        logger.error("Failed to fetch METAR for %s: %s", args.station, e)
        sys.exit(1)

    print(format_observation(obs))
    sys.exit(0)


if __name__ == "__main__":
    main()
