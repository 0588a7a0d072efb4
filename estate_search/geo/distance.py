"""Great-circle distance and radius filtering."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from .models import GeoPoint

if TYPE_CHECKING:
    from ..catalog.models import Property

EARTH_RADIUS_KM = 6371.0

# Absorbs rounding differences between the scalar and vectorised formulas
DISTANCE_TOLERANCE_KM = 1e-9


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """
    Great-circle distance between two points in kilometres.

    Uses the haversine formula with mean Earth radius 6371 km.
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    h = min(h, 1.0)
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def distances_km(center: GeoPoint, catalog: Sequence[Property]) -> np.ndarray:
    """
    Distance from center to every property, in catalog order.

    Args:
        center: Reference point
        catalog: Properties with latitude/longitude

    Returns:
        float64 array of shape (len(catalog),)
    """
    if not catalog:
        return np.empty(0, dtype=np.float64)

    lats = np.radians(np.array([p.latitude for p in catalog], dtype=np.float64))
    lons = np.array([p.longitude for p in catalog], dtype=np.float64)

    lat1 = math.radians(center.latitude)
    dlat = lats - lat1
    dlon = np.radians(lons - center.longitude)

    h = np.sin(dlat / 2) ** 2 + math.cos(lat1) * np.cos(lats) * np.sin(dlon / 2) ** 2
    # Rounding can push h a hair outside [0, 1] for antipodal points
    h = np.clip(h, 0.0, 1.0)
    return 2 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


def filter_within_radius(
    catalog: Sequence[Property],
    center: GeoPoint,
    radius_km: float,
) -> list[Property]:
    """
    Properties within radius_km of center, in catalog order.

    The boundary is inclusive: a property exactly radius_km away is kept.
    Pure function; entries are assumed to carry valid coordinates.

    Args:
        catalog: Properties to filter
        center: Query point
        radius_km: Search radius in kilometres

    Returns:
        Ordered subsequence of catalog
    """
    distances = distances_km(center, catalog)
    mask = distances <= radius_km + DISTANCE_TOLERANCE_KM
    return [prop for prop, keep in zip(catalog, mask) if keep]
