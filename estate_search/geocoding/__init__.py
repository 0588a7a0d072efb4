"""Place name geocoding."""

from .errors import GeocodingError, GeocodingRequestError
from .models import (
    SEARCH_FAILED_MESSAGE,
    PlaceCandidate,
    PlaceLookup,
    PlaceResolverConfig,
)
from .resolver import PlaceResolver

__all__ = [
    "GeocodingError",
    "GeocodingRequestError",
    "PlaceCandidate",
    "PlaceLookup",
    "PlaceResolver",
    "PlaceResolverConfig",
    "SEARCH_FAILED_MESSAGE",
]
