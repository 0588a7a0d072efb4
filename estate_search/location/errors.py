"""Custom exceptions for device location lookups."""


class LocationError(Exception):
    """
    Base exception for location failures.

    Subclasses set `reason` to one of the failure categories reported
    by platform geolocation APIs.
    """

    reason = "position_unavailable"


class LocationPermissionDenied(LocationError):
    """
    Raised when the user or platform refuses location access.

    This can happen when:
    - User declined the permission prompt
    - Location service rejected the client (401/403)
    """

    reason = "permission_denied"


class LocationUnavailable(LocationError):
    """
    Raised when no position could be determined.

    This can happen when:
    - Connection error
    - Location service returned an error status
    - Response is missing coordinates
    - Configured service URL is invalid
    """

    reason = "position_unavailable"


class LocationTimeout(LocationError):
    """Raised when the position was not obtained within the allowed wait."""

    reason = "timeout"
