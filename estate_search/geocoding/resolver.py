"""Free-text place resolver backed by a Nominatim-style geocoding service."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..geo.models import GeoPoint
from .errors import GeocodingError, GeocodingRequestError
from .models import (
    SEARCH_FAILED_MESSAGE,
    PlaceCandidate,
    PlaceLookup,
    PlaceResolverConfig,
)

logger = logging.getLogger(__name__)


class PlaceResolver:
    """
    Resolves place names to coordinates.

    Each lookup is a single GET request; there is no retry. Results are
    restricted to the configured country and capped at config.limit.

    Usage:
        resolver = PlaceResolver(PlaceResolverConfig())
        lookup = await resolver.resolve("Bandra West")
        for candidate in lookup.candidates:
            print(candidate.display_name, candidate.point)
    """

    def __init__(self, config: PlaceResolverConfig | None = None):
        """
        Initialize resolver.

        Args:
            config: Resolver configuration. Uses defaults if None.
        """
        self._config = config or PlaceResolverConfig()
        self._base_url = self._config.url.rstrip("/")

    @property
    def config(self) -> PlaceResolverConfig:
        return self._config

    def _build_params(self, query: str) -> dict[str, str | int]:
        return {
            "q": query,
            "format": "json",
            "countrycodes": self._config.country_codes,
            "limit": self._config.limit,
        }

    async def _request(self, query: str) -> Any:
        """
        Send the lookup request and decode the JSON body.

        Raises:
            GeocodingRequestError: If the request fails or the body is not JSON
        """
        url = f"{self._base_url}{self._config.endpoint}"

        async with httpx.AsyncClient(timeout=self._config.timeout) as client:
            try:
                response = await client.get(
                    url,
                    params=self._build_params(query),
                    headers={"User-Agent": self._config.user_agent},
                )
                response.raise_for_status()

                try:
                    return response.json()
                except ValueError as e:
                    raise GeocodingRequestError(
                        f"Invalid JSON response from geocoder: {e}"
                    ) from e

            except httpx.HTTPStatusError as e:
                raise GeocodingRequestError(
                    f"Request failed: {e.response.status_code} - {e.response.text}"
                ) from e
            except httpx.RequestError as e:
                raise GeocodingRequestError(f"Connection error: {e}") from e
            except httpx.InvalidURL as e:
                raise GeocodingRequestError(f"Invalid geocoder URL {url!r}: {e}") from e

    def _parse_candidate(self, item: Any) -> PlaceCandidate | None:
        """Convert one service result to a candidate, or None if unusable."""
        if not isinstance(item, dict):
            return None
        label = item.get("display_name")
        if not label:
            return None
        try:
            point = GeoPoint(float(item["lat"]), float(item["lon"]))
        except (KeyError, TypeError, ValueError):
            return None
        return PlaceCandidate(display_name=str(label), point=point)

    async def search(self, query: str) -> list[PlaceCandidate]:
        """
        Look up a place name.

        Args:
            query: Free-text place description

        Returns:
            Candidates in service ranking order, at most config.limit

        Raises:
            ValueError: If query is blank
            GeocodingRequestError: If the lookup fails or no result is usable
        """
        query = query.strip()
        if not query:
            raise ValueError("Place query must not be empty")

        logger.info(f"Looking up place {query!r}")
        data = await self._request(query)

        if not isinstance(data, list):
            raise GeocodingRequestError(
                f"Unexpected geocoder response type: {type(data).__name__}"
            )

        candidates = []
        for item in data:
            candidate = self._parse_candidate(item)
            if candidate is None:
                logger.debug(f"Skipping unusable geocoder result: {item!r}")
                continue
            candidates.append(candidate)

        if data and not candidates:
            raise GeocodingRequestError("No usable places in geocoder response")

        return candidates[: self._config.limit]

    async def resolve(self, query: str) -> PlaceLookup:
        """
        Look up a place name without raising on service failure.

        Geocoding failures are logged and reported through
        PlaceLookup.error with no candidates.

        Raises:
            ValueError: If query is blank
        """
        query = query.strip()
        try:
            candidates = await self.search(query)
        except GeocodingError as e:
            logger.warning(f"Place lookup for {query!r} failed: {e}")
            return PlaceLookup(query=query, error=SEARCH_FAILED_MESSAGE)

        logger.info(f"Place lookup for {query!r} returned {len(candidates)} results")
        return PlaceLookup(query=query, candidates=tuple(candidates))
