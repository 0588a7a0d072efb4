"""Tests for haversine distance and radius filtering."""

import random

import pytest

from estate_search.geo import (
    GeoPoint,
    distances_km,
    filter_within_radius,
    haversine_km,
)
from estate_search.tests.helpers import make_property

MUMBAI = GeoPoint(19.0760, 72.8777)
BANDRA = GeoPoint(19.0596, 72.8295)
BANGALORE = GeoPoint(12.9716, 77.5946)


def random_catalog(seed: int, size: int = 30):
    """Properties scattered around Mumbai, within roughly 100 km."""
    rng = random.Random(seed)
    return [
        make_property(
            i + 1,
            MUMBAI.latitude + rng.uniform(-1.0, 1.0),
            MUMBAI.longitude + rng.uniform(-1.0, 1.0),
        )
        for i in range(size)
    ]


class TestGeoPoint:
    """Tests for GeoPoint validation."""

    def test_valid_point(self):
        point = GeoPoint(19.0760, 72.8777)
        assert point.as_tuple() == (19.0760, 72.8777)

    def test_bounds_are_inclusive(self):
        GeoPoint(90.0, 180.0)
        GeoPoint(-90.0, -180.0)

    @pytest.mark.parametrize("latitude,longitude", [(90.1, 0.0), (-91.0, 0.0)])
    def test_latitude_out_of_range(self, latitude, longitude):
        with pytest.raises(ValueError, match="Latitude"):
            GeoPoint(latitude, longitude)

    @pytest.mark.parametrize("latitude,longitude", [(0.0, 180.5), (0.0, -181.0)])
    def test_longitude_out_of_range(self, latitude, longitude):
        with pytest.raises(ValueError, match="Longitude"):
            GeoPoint(latitude, longitude)


class TestHaversine:
    """Tests for haversine_km."""

    def test_same_point_is_zero(self):
        assert haversine_km(MUMBAI, MUMBAI) == 0.0

    def test_symmetric(self):
        assert haversine_km(MUMBAI, BANGALORE) == pytest.approx(
            haversine_km(BANGALORE, MUMBAI)
        )

    def test_mumbai_to_bandra(self):
        """Bandra West is a few km from the Mumbai centre."""
        assert 5.0 < haversine_km(MUMBAI, BANDRA) < 6.5

    def test_mumbai_to_bangalore(self):
        """Mumbai to Bangalore is roughly 840 km great-circle."""
        assert haversine_km(MUMBAI, BANGALORE) == pytest.approx(840, abs=15)

    def test_one_degree_of_latitude(self):
        """One degree along a meridian is R * pi / 180."""
        d = haversine_km(GeoPoint(0.0, 0.0), GeoPoint(1.0, 0.0))
        assert d == pytest.approx(111.195, abs=1e-3)

    def test_antipodal_points(self):
        """Antipodal points are half the circumference apart."""
        d = haversine_km(GeoPoint(0.0, 0.0), GeoPoint(0.0, 180.0))
        assert d == pytest.approx(3.14159265 * 6371.0, rel=1e-6)


class TestDistancesKm:
    """Tests for the vectorised distance computation."""

    def test_empty_catalog(self):
        assert distances_km(MUMBAI, []).shape == (0,)

    def test_matches_scalar_formula(self):
        catalog = random_catalog(seed=7)
        vector = distances_km(MUMBAI, catalog)

        for prop, d in zip(catalog, vector):
            assert d == pytest.approx(haversine_km(MUMBAI, prop.location), abs=1e-6)


class TestFilterWithinRadius:
    """Tests for filter_within_radius."""

    def test_mumbai_example(self):
        """Bandra is inside 10 km of Mumbai, Bangalore is not."""
        bandra = make_property(1, BANDRA.latitude, BANDRA.longitude)
        bangalore = make_property(2, BANGALORE.latitude, BANGALORE.longitude)

        result = filter_within_radius([bandra, bangalore], MUMBAI, 10)

        assert result == [bandra]

    def test_preserves_catalog_order(self, sample_catalog, mumbai_center):
        result = filter_within_radius(sample_catalog.properties, mumbai_center, 10)
        assert [p.id for p in result] == [1, 3, 5]

    def test_empty_catalog(self, mumbai_center):
        assert filter_within_radius([], mumbai_center, 10) == []

    def test_boundary_is_inclusive(self):
        """A property exactly radius_km away is included."""
        prop = make_property(1, BANDRA.latitude, BANDRA.longitude)
        radius = haversine_km(MUMBAI, BANDRA)

        assert filter_within_radius([prop], MUMBAI, radius) == [prop]

    def test_just_outside_boundary_is_excluded(self):
        prop = make_property(1, BANDRA.latitude, BANDRA.longitude)
        radius = haversine_km(MUMBAI, BANDRA) - 1e-3

        assert filter_within_radius([prop], MUMBAI, radius) == []

    def test_zero_radius_keeps_only_exact_center(self, sample_catalog, mumbai_center):
        result = filter_within_radius(sample_catalog.properties, mumbai_center, 0)
        assert [p.id for p in result] == [5]

    def test_negative_radius_returns_nothing(self, sample_catalog, mumbai_center):
        assert filter_within_radius(sample_catalog.properties, mumbai_center, -1) == []

    def test_accepts_radius_outside_ui_options(self, sample_catalog, mumbai_center):
        """Any positive radius works, not only the UI's choices."""
        result = filter_within_radius(sample_catalog.properties, mumbai_center, 2000)
        assert len(result) == len(sample_catalog)

    def test_accepts_plain_catalog_object(self, sample_catalog, mumbai_center):
        """A PropertyCatalog behaves like a sequence of properties."""
        result = filter_within_radius(sample_catalog, mumbai_center, 10)
        assert [p.id for p in result] == [1, 3, 5]


class TestFilterProperties:
    """Property-style checks over random catalogs."""

    @pytest.mark.parametrize("seed", [1, 2, 3])
    @pytest.mark.parametrize("radius", [0.0, 5.0, 25.0, 60.0])
    def test_membership_matches_distance(self, seed, radius):
        catalog = random_catalog(seed)
        result_ids = {p.id for p in filter_within_radius(catalog, MUMBAI, radius)}

        for prop in catalog:
            d = haversine_km(MUMBAI, prop.location)
            if abs(d - radius) < 1e-6:
                continue
            assert (prop.id in result_ids) == (d <= radius)

    @pytest.mark.parametrize("seed", [4, 5])
    def test_result_is_ordered_subsequence(self, seed):
        catalog = random_catalog(seed)
        result = filter_within_radius(catalog, MUMBAI, 50)

        positions = [catalog.index(p) for p in result]
        assert positions == sorted(positions)

    def test_idempotent(self):
        catalog = random_catalog(seed=6)
        first = [p.id for p in filter_within_radius(catalog, MUMBAI, 40)]
        second = [p.id for p in filter_within_radius(catalog, MUMBAI, 40)]
        assert first == second

    @pytest.mark.parametrize("seed", [8, 9])
    def test_monotonic_in_radius(self, seed):
        catalog = random_catalog(seed)
        radii = [0, 10, 25, 50, 100, 200]
        results = [
            {p.id for p in filter_within_radius(catalog, MUMBAI, r)} for r in radii
        ]

        for smaller, larger in zip(results, results[1:]):
            assert smaller <= larger
