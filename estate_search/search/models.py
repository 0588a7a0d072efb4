"""Data models for map search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..catalog.models import Property
from ..geo.models import GeoPoint
from ..geocoding.models import SEARCH_FAILED_MESSAGE, PlaceCandidate


class SearchStatus(str, Enum):
    """Where the controller is in a search."""

    IDLE = "idle"
    LOCATING = "locating"
    SEARCHING = "searching"
    LOCATED = "located"


class ErrorReason(str, Enum):
    """Why the last search attempt ended back in IDLE."""

    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
    NO_RESULTS = "no_results"
    SEARCH_FAILED = "search_failed"


# Radii offered by the UI; the controller accepts any positive radius
RADIUS_OPTIONS_KM: tuple[float, ...] = (5.0, 10.0, 25.0, 50.0, 100.0)


ERROR_MESSAGES: dict[ErrorReason, str] = {
    ErrorReason.PERMISSION_DENIED: (
        "Location access was denied. Allow location access and try again."
    ),
    ErrorReason.POSITION_UNAVAILABLE: (
        "Your location could not be determined. Please try again."
    ),
    ErrorReason.TIMEOUT: "Finding your location took too long. Please try again.",
    ErrorReason.NO_RESULTS: "No places found. Try a different search.",
    ErrorReason.SEARCH_FAILED: SEARCH_FAILED_MESSAGE,
}


@dataclass(frozen=True)
class MapSearchConfig:
    """Configuration for the map search controller."""

    default_radius_km: float = 10.0
    location_timeout_seconds: float = 10.0
    """Longest wait for a device position before reporting a timeout."""


@dataclass(frozen=True)
class SearchSelection:
    """The point and radius currently driving the search."""

    point: GeoPoint
    radius_km: float


@dataclass(frozen=True)
class SearchState:
    """Immutable snapshot of the controller, as published to the page."""

    status: SearchStatus
    radius_km: float
    selection: SearchSelection | None = None
    properties: tuple[Property, ...] = ()
    candidates: tuple[PlaceCandidate, ...] = ()
    error: ErrorReason | None = None
    message: str | None = None

    @property
    def count(self) -> int:
        """Number of properties found."""
        return len(self.properties)

    @property
    def property_ids(self) -> list[int]:
        return [p.id for p in self.properties]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "status": self.status.value,
            "radius_km": self.radius_km,
            "point": (
                {
                    "latitude": self.selection.point.latitude,
                    "longitude": self.selection.point.longitude,
                }
                if self.selection
                else None
            ),
            "property_ids": self.property_ids,
            "candidates": [c.to_dict() for c in self.candidates],
            "error": self.error.value if self.error else None,
            "message": self.message,
        }
