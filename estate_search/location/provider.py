"""Device location sources."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx

from ..geo.models import GeoPoint
from .errors import LocationPermissionDenied, LocationTimeout, LocationUnavailable

logger = logging.getLogger(__name__)


@runtime_checkable
class LocationProvider(Protocol):
    """Anything that can report the user's current position."""

    async def get_position(self) -> GeoPoint:
        """
        Return the current position.

        Raises:
            LocationPermissionDenied: If access is refused
            LocationUnavailable: If no position can be determined
            LocationTimeout: If the lookup took too long
        """
        ...


class StaticLocationProvider:
    """Reports a fixed position, or 'unavailable' when none is configured."""

    def __init__(self, point: GeoPoint | None = None):
        self._point = point

    async def get_position(self) -> GeoPoint:
        if self._point is None:
            raise LocationUnavailable("No position configured")
        return self._point


@dataclass(frozen=True)
class IpLocationConfig:
    """Configuration for IP-based location lookup."""

    url: str = "https://ipapi.co/json/"
    timeout: float = 10.0
    user_agent: str = "estate-search/0.1"


class IpLocationProvider:
    """
    Approximates the device position from its public IP address.

    Expects a JSON body with 'latitude' and 'longitude' keys.
    """

    def __init__(self, config: IpLocationConfig | None = None):
        self._config = config or IpLocationConfig()

    async def get_position(self) -> GeoPoint:
        async with httpx.AsyncClient(timeout=self._config.timeout) as client:
            try:
                response = await client.get(
                    self._config.url,
                    headers={"User-Agent": self._config.user_agent},
                )
            except httpx.TimeoutException as e:
                raise LocationTimeout(f"Location lookup timed out: {e}") from e
            except httpx.RequestError as e:
                raise LocationUnavailable(f"Connection error: {e}") from e
            except httpx.InvalidURL as e:
                raise LocationUnavailable(
                    f"Invalid location URL {self._config.url!r}: {e}"
                ) from e

        if response.status_code in (401, 403):
            raise LocationPermissionDenied(
                f"Location service refused access: {response.status_code}"
            )
        if response.status_code >= 400:
            raise LocationUnavailable(
                f"Location service error: {response.status_code} - {response.text}"
            )

        try:
            data = response.json()
            point = GeoPoint(float(data["latitude"]), float(data["longitude"]))
        except (KeyError, TypeError, ValueError) as e:
            raise LocationUnavailable(f"Invalid location response: {e}") from e

        logger.info(f"Resolved device position to {point}")
        return point
