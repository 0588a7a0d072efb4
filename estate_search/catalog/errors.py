"""Custom exceptions for the property catalog."""


class CatalogError(Exception):
    """Base exception for catalog-related errors."""

    pass


class CatalogLoadError(CatalogError):
    """
    Raised when a catalog file cannot be loaded.

    This can happen when:
    - Catalog file not found
    - Invalid YAML syntax
    - Top-level 'properties' list missing
    """

    pass


class InvalidPropertyError(CatalogError):
    """
    Raised when a property record is malformed.

    This can happen when:
    - Required field (id, latitude, longitude, address, city) is missing
    - Coordinates are outside WGS84 bounds
    - Numeric attribute is negative
    """

    pass


class DuplicatePropertyError(CatalogError):
    """Raised when two records share the same property id."""

    pass


class PropertyNotFoundError(CatalogError):
    """Raised when a property id is not in the catalog."""

    def __init__(self, property_id: int):
        super().__init__(f"Property not found: {property_id}")
        self.property_id = property_id
