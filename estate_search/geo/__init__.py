"""
Geographic primitives for radius search.

Main components:
- GeoPoint: Validated WGS84 coordinate
- haversine_km: Great-circle distance between two points
- filter_within_radius: Catalog subset within a radius of a point
"""

from .distance import (
    DISTANCE_TOLERANCE_KM,
    EARTH_RADIUS_KM,
    distances_km,
    filter_within_radius,
    haversine_km,
)
from .models import GeoPoint

__all__ = [
    "GeoPoint",
    "haversine_km",
    "distances_km",
    "filter_within_radius",
    "EARTH_RADIUS_KM",
    "DISTANCE_TOLERANCE_KM",
]
