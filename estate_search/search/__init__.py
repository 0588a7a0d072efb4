"""
Map radius search.

MapSearchController turns map clicks, device location and place
searches into one selected point and publishes the catalog properties
within the chosen radius.
"""

from .controller import MapSearchController
from .models import (
    ERROR_MESSAGES,
    RADIUS_OPTIONS_KM,
    ErrorReason,
    MapSearchConfig,
    SearchSelection,
    SearchState,
    SearchStatus,
)

__all__ = [
    "MapSearchController",
    "MapSearchConfig",
    "SearchSelection",
    "SearchState",
    "SearchStatus",
    "ErrorReason",
    "ERROR_MESSAGES",
    "RADIUS_OPTIONS_KM",
]
