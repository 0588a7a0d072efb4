"""Listing-page helpers: city/text filtering, id lists and map links."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from urllib.parse import urlencode

from .models import Property

ALL_CITIES = "All"

GOOGLE_MAPS_SEARCH_URL = "https://www.google.com/maps/search/"


def normalize_city(value: str | None) -> str:
    """
    Normalize a city query parameter.

    "mumbai" and "MUMBAI" become "Mumbai"; missing or blank means "All".
    """
    if value is None or not value.strip():
        return ALL_CITIES
    value = value.strip()
    return value[0].upper() + value[1:].lower()


def parse_ids(value: str | None) -> list[int] | None:
    """
    Parse a comma-separated id list such as "1,4,7".

    Blank entries and non-numeric entries are skipped.

    Returns:
        List of ids, or None when no id list was given
    """
    if value is None or not value.strip():
        return None
    ids = []
    for part in value.split(","):
        part = part.strip()
        if part.isdigit():
            ids.append(int(part))
    return ids


def format_ids(properties: Iterable[Property]) -> str:
    """Render property ids as a comma-separated list."""
    return ",".join(str(p.id) for p in properties)


def _matches_term(prop: Property, term: str) -> bool:
    return (
        term in prop.address.lower()
        or term in prop.description.lower()
        or term in prop.city.lower()
    )


def filter_listings(
    properties: Sequence[Property],
    ids: Iterable[int] | None = None,
    city: str | None = None,
    search_term: str = "",
) -> list[Property]:
    """
    Filter catalog properties for the listing page.

    When ids are given (e.g. results handed over from map search) they
    filter exclusively and city/search_term are ignored. Otherwise a
    property must contain search_term exactly as typed (case-insensitive,
    whitespace kept) in its address, description or city, and belong to
    city unless city is "All".

    Args:
        properties: Properties in catalog order
        ids: Optional explicit id list
        city: City name, or None/"All" for every city
        search_term: Free-text substring

    Returns:
        Matching properties in catalog order
    """
    if ids is not None:
        wanted = set(ids)
        return [p for p in properties if p.id in wanted]

    term = search_term.lower()
    city = normalize_city(city)

    return [
        p
        for p in properties
        if _matches_term(p, term) and (city == ALL_CITIES or p.city == city)
    ]


def maps_url(prop: Property) -> str:
    """Google Maps search link centred on the property."""
    query = urlencode(
        {"api": 1, "query": f"{prop.latitude},{prop.longitude}"}, safe=","
    )
    return f"{GOOGLE_MAPS_SEARCH_URL}?{query}"
