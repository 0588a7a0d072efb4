"""
Search runner configuration management.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any

import httpx
from dotenv import load_dotenv

from ..geo.models import GeoPoint
from ..search.models import RADIUS_OPTIONS_KM


def add_args(parser: argparse.ArgumentParser) -> None:
    """
    Add search arguments to the parser.

    Arguments can be overridden by environment variables.
    """

    target = parser.add_mutually_exclusive_group(required=True)

    target.add_argument(
        "--place",
        type=str,
        help="Place name to search around (e.g. 'Bandra West').",
    )

    target.add_argument(
        "--point",
        type=str,
        metavar="LAT,LON",
        help="Coordinate to search around, as 'latitude,longitude'.",
    )

    target.add_argument(
        "--use_location",
        action="store_true",
        help="Search around the device location (IP-based).",
    )

    parser.add_argument(
        "--pick",
        type=int,
        help="Index of the place candidate to use.",
        default=0,
    )

    parser.add_argument(
        "--radius",
        type=float,
        choices=RADIUS_OPTIONS_KM,
        help="Search radius in km.",
        default=float(os.environ.get("SEARCH_RADIUS_KM", "10")),
    )

    parser.add_argument(
        "--catalog.path",
        dest="catalog_path",
        type=str,
        help="Path to a properties YAML file. Uses the bundled catalog if empty.",
        default=os.environ.get("CATALOG_PATH", ""),
    )

    parser.add_argument(
        "--geocoder.url",
        dest="geocoder_url",
        type=str,
        help="Base URL of the Nominatim-compatible geocoding service.",
        default=os.environ.get("GEOCODER_URL", "https://nominatim.openstreetmap.org"),
    )

    parser.add_argument(
        "--geocoder.country",
        dest="geocoder_country",
        type=str,
        help="Country code(s) results are restricted to.",
        default=os.environ.get("GEOCODER_COUNTRY", "in"),
    )

    parser.add_argument(
        "--geocoder.limit",
        dest="geocoder_limit",
        type=int,
        help="Maximum number of place candidates.",
        default=int(os.environ.get("GEOCODER_LIMIT", "5")),
    )

    parser.add_argument(
        "--geocoder.timeout",
        dest="geocoder_timeout",
        type=float,
        help="HTTP timeout in seconds for place lookups.",
        default=float(os.environ.get("GEOCODER_TIMEOUT", "5")),
    )

    parser.add_argument(
        "--location.url",
        dest="location_url",
        type=str,
        help="IP geolocation endpoint used for --use_location.",
        default=os.environ.get("LOCATION_URL", "https://ipapi.co/json/"),
    )

    parser.add_argument(
        "--location.timeout",
        dest="location_timeout",
        type=float,
        help="Seconds to wait for the device location.",
        default=float(os.environ.get("LOCATION_TIMEOUT", "10")),
    )

    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level.",
        default=os.environ.get("LOG_LEVEL", "WARNING"),
    )


def get_config(args: list[str] | None = None) -> argparse.Namespace:
    """Parse arguments (with .env support) and return configuration."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="estate-search",
        description="EstateIndia map radius search",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    add_args(parser)
    config = parser.parse_args(args)

    config.catalog_path = Path(config.catalog_path) if config.catalog_path else None

    return config


def parse_point(value: str) -> tuple[float, float]:
    """
    Parse 'latitude,longitude'.

    Raises:
        ValueError: If the value is not two comma-separated numbers
    """
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected 'latitude,longitude', got {value!r}")
    return float(parts[0]), float(parts[1])


def check_config(config: argparse.Namespace) -> None:
    """
    Validate configuration.

    Raises:
        ValueError: If configuration is invalid.
    """
    if config.place is not None and not config.place.strip():
        raise ValueError("--place must not be empty")

    if config.point is not None:
        GeoPoint(*parse_point(config.point))

    if config.radius not in RADIUS_OPTIONS_KM:
        raise ValueError(
            f"--radius must be one of {list(RADIUS_OPTIONS_KM)}, got {config.radius}"
        )

    for option, url in (
        ("--geocoder.url", config.geocoder_url),
        ("--location.url", config.location_url),
    ):
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise ValueError(f"{option} is not a valid URL: {e}") from e
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise ValueError(f"{option} must be an http(s) URL: {url!r}")

    if config.pick < 0:
        raise ValueError("--pick must be zero or greater")

    if not 1 <= config.geocoder_limit <= 50:
        raise ValueError("--geocoder.limit must be between 1 and 50")

    if config.location_timeout <= 0:
        raise ValueError("--location.timeout must be positive")

    if config.catalog_path is not None and not config.catalog_path.exists():
        raise ValueError(f"--catalog.path does not exist: {config.catalog_path}")


def config_to_dict(config: argparse.Namespace) -> dict[str, Any]:
    """Convert config to dictionary for logging."""
    return {
        "place": config.place,
        "point": config.point,
        "use_location": config.use_location,
        "pick": config.pick,
        "radius": config.radius,
        "catalog_path": str(config.catalog_path) if config.catalog_path else None,
        "geocoder_url": config.geocoder_url,
        "geocoder_country": config.geocoder_country,
        "geocoder_limit": config.geocoder_limit,
        "geocoder_timeout": config.geocoder_timeout,
        "location_url": config.location_url,
        "location_timeout": config.location_timeout,
        "log_level": config.log_level,
    }


def setup_logging(level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
