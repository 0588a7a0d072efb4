"""Data models for place lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..geo.models import GeoPoint

SEARCH_FAILED_MESSAGE = "Search failed. Please try again."


@dataclass(frozen=True)
class PlaceResolverConfig:
    """Configuration for the place resolver."""

    url: str = "https://nominatim.openstreetmap.org"
    endpoint: str = "/search"
    country_codes: str = "in"  # Restrict results to India
    limit: int = 5
    timeout: float = 5.0  # Same as the httpx default
    user_agent: str = "estate-search/0.1"


@dataclass(frozen=True)
class PlaceCandidate:
    """A geocoded place offered to the user."""

    display_name: str
    point: GeoPoint

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "display_name": self.display_name,
            "latitude": self.point.latitude,
            "longitude": self.point.longitude,
        }


@dataclass(frozen=True)
class PlaceLookup:
    """
    Outcome of one place lookup.

    A failed lookup has no candidates and a user-facing error message.
    An empty but successful lookup has no candidates and no error.
    """

    query: str
    candidates: tuple[PlaceCandidate, ...] = field(default_factory=tuple)
    error: str | None = None

    @property
    def failed(self) -> bool:
        """True if the lookup could not be completed."""
        return self.error is not None

    @property
    def is_empty(self) -> bool:
        """True if the service answered with no matches."""
        return not self.failed and not self.candidates