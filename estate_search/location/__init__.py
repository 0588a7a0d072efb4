"""Device location sources for "use my location" searches."""

from .errors import (
    LocationError,
    LocationPermissionDenied,
    LocationTimeout,
    LocationUnavailable,
)
from .provider import (
    IpLocationConfig,
    IpLocationProvider,
    LocationProvider,
    StaticLocationProvider,
)

__all__ = [
    # Errors
    "LocationError",
    "LocationPermissionDenied",
    "LocationTimeout",
    "LocationUnavailable",
    # Providers
    "LocationProvider",
    "StaticLocationProvider",
    "IpLocationConfig",
    "IpLocationProvider",
]
