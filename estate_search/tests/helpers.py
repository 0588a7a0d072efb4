"""Factories shared by tests."""

from estate_search.catalog import Property


def make_property(
    property_id: int,
    latitude: float,
    longitude: float,
    city: str = "Mumbai",
    address: str | None = None,
    description: str = "",
) -> Property:
    """Create a test property at the given coordinates."""
    return Property(
        id=property_id,
        latitude=latitude,
        longitude=longitude,
        address=address or f"Test Address {property_id}, {city}",
        city=city,
        price="₹1 Cr",
        beds=2,
        baths=2,
        sqft="1,000",
        status="New Listing",
        description=description,
    )
