"""Data models for the property catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..geo.models import GeoPoint
from .errors import InvalidPropertyError

_REQUIRED_FIELDS = ("id", "latitude", "longitude", "address", "city")


@dataclass(frozen=True)
class Property:
    """
    A listed property.

    Display attributes (price, sqft, status) are kept as shown on the
    site, e.g. price "₹2.5 Cr" and sqft "1,450".
    """

    id: int
    latitude: float
    longitude: float
    address: str
    city: str
    price: str = ""
    beds: int = 0
    baths: int = 0
    sqft: str = ""
    status: str = ""
    featured: bool = False
    description: str = ""
    images: tuple[str, ...] = field(default_factory=tuple)

    @property
    def location(self) -> GeoPoint:
        """Coordinate of the property."""
        return GeoPoint(self.latitude, self.longitude)

    @property
    def image(self) -> str | None:
        """Primary image URL, if any."""
        return self.images[0] if self.images else None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Property:
        """
        Build a Property from a raw catalog record.

        Accepts either an 'images' list or a single 'image' URL.

        Raises:
            InvalidPropertyError: If the record is malformed
        """
        missing = [name for name in _REQUIRED_FIELDS if data.get(name) is None]
        if missing:
            raise InvalidPropertyError(
                f"Property record missing required fields: {missing}"
            )

        images = data.get("images")
        if images is None:
            images = [data["image"]] if data.get("image") else []

        try:
            prop = cls(
                id=int(data["id"]),
                latitude=float(data["latitude"]),
                longitude=float(data["longitude"]),
                address=str(data["address"]),
                city=str(data["city"]),
                price=str(data.get("price", "")),
                beds=int(data.get("beds", 0)),
                baths=int(data.get("baths", 0)),
                sqft=str(data.get("sqft", "")),
                status=str(data.get("status", "")),
                featured=bool(data.get("featured", False)),
                description=str(data.get("description", "")),
                images=tuple(str(url) for url in images),
            )
        except (TypeError, ValueError) as e:
            raise InvalidPropertyError(
                f"Invalid property record {data.get('id')!r}: {e}"
            ) from e

        prop._validate()
        return prop

    def _validate(self) -> None:
        if self.id <= 0:
            raise InvalidPropertyError(f"Property id must be positive: {self.id}")
        if self.beds < 0 or self.baths < 0:
            raise InvalidPropertyError(
                f"Property {self.id} has negative beds/baths"
            )
        if not self.address.strip() or not self.city.strip():
            raise InvalidPropertyError(
                f"Property {self.id} has empty address or city"
            )
        try:
            self.location
        except ValueError as e:
            raise InvalidPropertyError(f"Property {self.id}: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "address": self.address,
            "city": self.city,
            "price": self.price,
            "beds": self.beds,
            "baths": self.baths,
            "sqft": self.sqft,
            "status": self.status,
            "featured": self.featured,
            "description": self.description,
            "images": list(self.images),
        }
