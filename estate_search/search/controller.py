"""Map search controller: one selected point from clicks, location and place search."""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Awaitable, Callable, Iterable

from ..catalog.catalog import get_catalog
from ..catalog.models import Property
from ..geo.distance import filter_within_radius
from ..geo.models import GeoPoint
from ..geocoding.models import PlaceCandidate
from ..geocoding.resolver import PlaceResolver
from ..location.errors import LocationError, LocationTimeout
from ..location.provider import LocationProvider
from .models import (
    ERROR_MESSAGES,
    ErrorReason,
    MapSearchConfig,
    SearchSelection,
    SearchState,
    SearchStatus,
)

logger = logging.getLogger(__name__)

StateCallback = Callable[[SearchState], None | Awaitable[None]]
ResultsCallback = Callable[[list[Property]], None | Awaitable[None]]


async def _notify(callback: Callable | None, payload: object) -> None:
    """Call a sync or async callback."""
    if callback is None:
        return
    result = callback(payload)
    if asyncio.iscoroutine(result):
        await result


class MapSearchController:
    """
    Single source of truth for the map search selection.

    States:
        IDLE -> LOCATING -> LOCATED      ("use my location")
        IDLE -> SEARCHING -> LOCATED     (place search, then candidate pick)
        any  -> LOCATED                  (map click)
        any  -> IDLE                     (clear, or a failed lookup)

    Every request takes a new sequence number. A location or place result
    that arrives after a newer request started is discarded, so the last
    request always wins. Entering or staying in LOCATED re-filters the
    catalog and publishes the results through on_results.

    Usage:
        controller = MapSearchController(
            resolver=PlaceResolver(),
            location_provider=IpLocationProvider(),
            on_results=show_results,
        )
        await controller.search_place("Powai")
        await controller.select_candidate(0)
        await controller.set_radius(25)
    """

    def __init__(
        self,
        resolver: PlaceResolver,
        location_provider: LocationProvider,
        catalog: Iterable[Property] | None = None,
        config: MapSearchConfig | None = None,
        on_change: StateCallback | None = None,
        on_results: ResultsCallback | None = None,
    ):
        """
        Initialize controller.

        Args:
            resolver: Place resolver for text searches
            location_provider: Source of the device position
            catalog: Properties to search. Uses the process-wide catalog if None.
            config: Controller configuration. Uses defaults if None.
            on_change: Called with every new SearchState (sync or async)
            on_results: Called with the filtered properties whenever they
                are recomputed in LOCATED (sync or async)
        """
        self._resolver = resolver
        self._location = location_provider
        self._catalog = tuple(catalog if catalog is not None else get_catalog())
        self._config = config or MapSearchConfig()
        self._on_change = on_change
        self._on_results = on_results

        self._status = SearchStatus.IDLE
        self._point: GeoPoint | None = None
        self._radius_km = self._config.default_radius_km
        self._properties: tuple[Property, ...] = ()
        self._candidates: tuple[PlaceCandidate, ...] = ()
        self._error: ErrorReason | None = None
        self._message: str | None = None

        self._sequence = 0
        self._closed = False

    # --- Consumer view ---

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def radius_km(self) -> float:
        return self._radius_km

    @property
    def selection(self) -> SearchSelection | None:
        """Current point and radius, or None when nothing is selected."""
        if self._point is None:
            return None
        return SearchSelection(point=self._point, radius_km=self._radius_km)

    @property
    def properties(self) -> list[Property]:
        """Properties within the radius of the selected point."""
        return list(self._properties)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def state(self) -> SearchState:
        """Immutable snapshot of the current state."""
        return SearchState(
            status=self._status,
            radius_km=self._radius_km,
            selection=self.selection,
            properties=self._properties,
            candidates=self._candidates,
            error=self._error,
            message=self._message,
        )

    # --- Request bookkeeping ---

    def _begin_request(self) -> int:
        self._sequence += 1
        return self._sequence

    def _is_current(self, sequence: int) -> bool:
        return not self._closed and sequence == self._sequence

    def _reset(self, status: SearchStatus) -> None:
        self._status = status
        self._point = None
        self._properties = ()
        self._candidates = ()
        self._error = None
        self._message = None

    async def _publish(self, with_results: bool = False) -> SearchState:
        state = self.state
        await _notify(self._on_change, state)
        if with_results:
            await _notify(self._on_results, list(self._properties))
        return state

    async def _locate(self, point: GeoPoint) -> SearchState:
        """Enter LOCATED at point and publish the filtered properties."""
        self._reset(SearchStatus.LOCATED)
        self._point = point
        self._properties = tuple(
            filter_within_radius(self._catalog, point, self._radius_km)
        )
        logger.info(
            f"Found {len(self._properties)} properties within "
            f"{self._radius_km:g} km of {point}"
        )
        return await self._publish(with_results=True)

    async def _fail(self, reason: ErrorReason, message: str | None = None) -> SearchState:
        """Return to IDLE with a user-visible message."""
        self._reset(SearchStatus.IDLE)
        self._error = reason
        self._message = message or ERROR_MESSAGES[reason]
        logger.info(f"Search ended without a location: {reason.value}")
        return await self._publish()

    # --- Inputs ---

    async def select_point(self, point: GeoPoint) -> SearchState:
        """Use a clicked map coordinate as the search centre."""
        if self._closed:
            return self.state
        self._begin_request()
        return await self._locate(point)

    async def use_my_location(self) -> SearchState:
        """
        Search around the device position.

        Waits at most config.location_timeout_seconds. Failures return
        the controller to IDLE with the failure reason.
        """
        if self._closed:
            return self.state
        sequence = self._begin_request()
        self._reset(SearchStatus.LOCATING)
        await self._publish()

        failure: LocationError | None = None
        point: GeoPoint
        try:
            point = await asyncio.wait_for(
                self._location.get_position(),
                timeout=self._config.location_timeout_seconds,
            )
        except asyncio.TimeoutError:
            failure = LocationTimeout(
                f"No position after {self._config.location_timeout_seconds}s"
            )
        except LocationError as e:
            failure = e

        if not self._is_current(sequence):
            logger.debug(f"Discarding stale location response (request {sequence})")
            return self.state

        if failure is not None:
            logger.warning(f"Device location failed: {failure}")
            return await self._fail(ErrorReason(failure.reason))

        return await self._locate(point)

    async def search_place(self, query: str) -> SearchState:
        """
        Look up a place name and offer the matches as candidates.

        With at least one match the controller stays in SEARCHING until
        select_candidate() is called. Blank queries are ignored.
        """
        if self._closed:
            return self.state
        query = query.strip()
        if not query:
            logger.debug("Ignoring blank place query")
            return self.state

        sequence = self._begin_request()
        self._reset(SearchStatus.SEARCHING)
        await self._publish()

        lookup = await self._resolver.resolve(query)

        if not self._is_current(sequence):
            logger.debug(f"Discarding stale place lookup for {query!r} (request {sequence})")
            return self.state

        if lookup.failed:
            return await self._fail(ErrorReason.SEARCH_FAILED, lookup.error)
        if lookup.is_empty:
            return await self._fail(ErrorReason.NO_RESULTS)

        self._candidates = lookup.candidates
        return await self._publish()

    async def select_candidate(self, candidate: PlaceCandidate | int) -> SearchState:
        """
        Pick one of the offered place candidates, by value or index.

        Raises:
            ValueError: If no candidates are on offer or the pick is not one of them
        """
        if self._closed:
            return self.state
        if not self._candidates:
            raise ValueError("No place candidates to choose from")

        if isinstance(candidate, int):
            if not 0 <= candidate < len(self._candidates):
                raise ValueError(f"Candidate index out of range: {candidate}")
            candidate = self._candidates[candidate]
        elif candidate not in self._candidates:
            raise ValueError(f"Unknown place candidate: {candidate.display_name}")

        self._begin_request()
        logger.info(f"Selected place {candidate.display_name!r}")
        return await self._locate(candidate.point)

    async def set_radius(self, radius_km: float) -> SearchState:
        """
        Change the search radius.

        In LOCATED the catalog is re-filtered around the same point.

        Raises:
            ValueError: If radius_km is not a positive finite number
        """
        if not (math.isfinite(radius_km) and radius_km > 0):
            raise ValueError(f"Radius must be positive and finite: {radius_km}")
        if self._closed:
            return self.state

        self._radius_km = float(radius_km)
        if self._status is SearchStatus.LOCATED and self._point is not None:
            return await self._locate(self._point)
        return await self._publish()

    async def clear(self) -> SearchState:
        """Discard the selection and any outstanding request."""
        if self._closed:
            return self.state
        self._begin_request()
        self._reset(SearchStatus.IDLE)
        return await self._publish()

    def close(self) -> None:
        """Abandon outstanding requests; later inputs are ignored."""
        self._begin_request()
        self._closed = True

    def submit(self) -> list[int]:
        """Ids of the properties found, for handing to the listing page."""
        if self._status is not SearchStatus.LOCATED:
            return []
        return [p.id for p in self._properties]
