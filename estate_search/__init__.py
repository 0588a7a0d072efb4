"""EstateIndia property search: catalog, radius search, geocoding and support assistant."""

__version__ = "0.1.0"
