"""
Property catalog and listing helpers.

The catalog is read-only at runtime. A packaged sample catalog is loaded
on first use of get_catalog(); set_catalog() injects another one.
"""

from .catalog import (
    DEFAULT_CATALOG_PATH,
    PropertyCatalog,
    get_catalog,
    reset_catalog,
    set_catalog,
)
from .errors import (
    CatalogError,
    CatalogLoadError,
    DuplicatePropertyError,
    InvalidPropertyError,
    PropertyNotFoundError,
)
from .listing import (
    ALL_CITIES,
    filter_listings,
    format_ids,
    maps_url,
    normalize_city,
    parse_ids,
)
from .models import Property

__all__ = [
    # Errors
    "CatalogError",
    "CatalogLoadError",
    "DuplicatePropertyError",
    "InvalidPropertyError",
    "PropertyNotFoundError",
    # Models
    "Property",
    "PropertyCatalog",
    # Process-wide catalog
    "DEFAULT_CATALOG_PATH",
    "get_catalog",
    "set_catalog",
    "reset_catalog",
    # Listing helpers
    "ALL_CITIES",
    "filter_listings",
    "format_ids",
    "maps_url",
    "normalize_city",
    "parse_ids",
]
