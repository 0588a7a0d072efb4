"""Pytest configuration and shared fixtures."""

import pytest

from estate_search.catalog import PropertyCatalog, reset_catalog
from estate_search.geo import GeoPoint

from .helpers import make_property


@pytest.fixture(autouse=True)
def reset_catalog_after_test():
    """
    Reset the process-wide catalog after each test.

    This prevents a catalog injected with set_catalog() in one test from
    leaking into the next.
    """
    yield
    reset_catalog()


@pytest.fixture
def mumbai_center():
    """Mumbai city centre."""
    return GeoPoint(19.0760, 72.8777)


@pytest.fixture
def sample_catalog():
    """Small catalog spanning Mumbai, Bangalore and Delhi."""
    return PropertyCatalog(
        [
            make_property(1, 19.0596, 72.8295, address="Bandra West, Mumbai"),
            make_property(2, 12.9716, 77.5946, city="Bangalore", address="MG Road, Bangalore"),
            make_property(3, 19.1176, 72.9060, address="Powai, Mumbai"),
            make_property(4, 28.5293, 77.1519, city="Delhi", address="Vasant Kunj, Delhi"),
            make_property(5, 19.0760, 72.8777, address="Kurla, Mumbai"),
        ]
    )
