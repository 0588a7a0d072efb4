"""Custom exceptions for place geocoding."""


class GeocodingError(Exception):
    """Base exception for geocoding-related errors."""

    pass


class GeocodingRequestError(GeocodingError):
    """
    Raised when a place lookup fails.

    This can happen when:
    - Connection error or transport timeout
    - HTTP error status
    - Invalid JSON response
    - Response is not a list of places
    - No entry in a non-empty response is usable
    - Configured service URL is invalid
    """

    pass
