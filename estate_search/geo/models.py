"""Coordinate types shared by search components."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """A WGS84 coordinate in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range [-90, 90]: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(
                f"Longitude out of range [-180, 180]: {self.longitude}"
            )

    def as_tuple(self) -> tuple[float, float]:
        """Return (latitude, longitude)."""
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        return f"{self.latitude:.4f},{self.longitude:.4f}"
