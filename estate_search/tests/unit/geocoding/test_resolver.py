"""Tests for PlaceResolver."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from estate_search.geocoding import (
    SEARCH_FAILED_MESSAGE,
    GeocodingRequestError,
    PlaceResolver,
    PlaceResolverConfig,
)

SEARCH_URL = "https://geocoder.example.com/search"


@pytest.fixture
def config():
    """Create test resolver config."""
    return PlaceResolverConfig(url="https://geocoder.example.com/", limit=3)


@pytest.fixture
def resolver(config):
    return PlaceResolver(config)


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        json=payload,
        request=httpx.Request("GET", SEARCH_URL),
    )


@pytest.fixture
def places_payload():
    """Nominatim-style results, coordinates as strings."""
    return [
        {
            "display_name": "Bandra West, Mumbai Suburban, Maharashtra, India",
            "lat": "19.0596",
            "lon": "72.8295",
        },
        {
            "display_name": "Bandra East, Mumbai Suburban, Maharashtra, India",
            "lat": "19.0607",
            "lon": "72.8490",
        },
    ]


class TestSearch:
    """Tests for search method."""

    async def test_returns_candidates_in_service_order(self, resolver, places_payload):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            return_value=json_response(places_payload),
        ):
            candidates = await resolver.search("Bandra")

        assert [c.display_name for c in candidates] == [
            "Bandra West, Mumbai Suburban, Maharashtra, India",
            "Bandra East, Mumbai Suburban, Maharashtra, India",
        ]
        assert candidates[0].point.as_tuple() == (19.0596, 72.8295)

    async def test_sends_country_and_limit(self, resolver):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            return_value=json_response([]),
        ) as mock_get:
            await resolver.search("  Powai  ")

        args, kwargs = mock_get.call_args
        assert args[0] == SEARCH_URL
        assert kwargs["params"] == {
            "q": "Powai",
            "format": "json",
            "countrycodes": "in",
            "limit": 3,
        }
        assert "User-Agent" in kwargs["headers"]

    async def test_caps_results_at_limit(self, resolver):
        payload = [
            {"display_name": f"Place {i}", "lat": "19.0", "lon": "72.8"} for i in range(6)
        ]
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            return_value=json_response(payload),
        ):
            candidates = await resolver.search("Place")

        assert len(candidates) == 3

    async def test_skips_unusable_entries(self, resolver):
        payload = [
            {"display_name": "No coordinates"},
            {"lat": "19.0", "lon": "72.8"},
            {"display_name": "Bad latitude", "lat": "north", "lon": "72.8"},
            {"display_name": "Off the globe", "lat": "95.0", "lon": "72.8"},
            "not a dict",
            {"display_name": "Juhu, Mumbai", "lat": 19.1075, "lon": 72.8263},
        ]
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            return_value=json_response(payload),
        ):
            candidates = await resolver.search("Juhu")

        assert [c.display_name for c in candidates] == ["Juhu, Mumbai"]

    async def test_no_usable_entries_raises_request_error(self, resolver):
        """A non-empty answer with nothing usable is a failure, not zero matches."""
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            return_value=json_response([{"unexpected": 1}, "garbage"]),
        ):
            with pytest.raises(GeocodingRequestError, match="No usable places"):
                await resolver.search("Bandra")

    async def test_invalid_configured_url_raises_request_error(self):
        resolver = PlaceResolver(PlaceResolverConfig(url="http://geocoder:notaport"))

        with pytest.raises(GeocodingRequestError, match="Invalid geocoder URL"):
            await resolver.search("Bandra")

    async def test_invalid_url_from_client_raises_request_error(self, resolver):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            side_effect=httpx.InvalidURL("Invalid port"),
        ):
            with pytest.raises(GeocodingRequestError, match="Invalid geocoder URL"):
                await resolver.search("Bandra")

    async def test_blank_query_raises_without_request(self, resolver):
        with patch.object(httpx.AsyncClient, "get", new_callable=AsyncMock) as mock_get:
            with pytest.raises(ValueError, match="empty"):
                await resolver.search("   ")

        mock_get.assert_not_called()

    async def test_500_raises_request_error(self, resolver):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            return_value=json_response({"error": "boom"}, status_code=500),
        ):
            with pytest.raises(GeocodingRequestError, match="Request failed"):
                await resolver.search("Bandra")

    async def test_connection_error_raises_request_error(self, resolver):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            side_effect=httpx.ConnectError("Connection refused"),
        ):
            with pytest.raises(GeocodingRequestError, match="Connection error"):
                await resolver.search("Bandra")

    async def test_timeout_raises_request_error(self, resolver):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            side_effect=httpx.ReadTimeout("timed out"),
        ):
            with pytest.raises(GeocodingRequestError, match="Connection error"):
                await resolver.search("Bandra")

    async def test_invalid_json_raises_request_error(self, resolver):
        response = httpx.Response(
            200,
            content=b"not json",
            request=httpx.Request("GET", SEARCH_URL),
        )
        with patch.object(
            httpx.AsyncClient, "get", new_callable=AsyncMock, return_value=response
        ):
            with pytest.raises(GeocodingRequestError, match="Invalid JSON"):
                await resolver.search("Bandra")

    async def test_non_list_payload_raises_request_error(self, resolver):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            return_value=json_response({"results": []}),
        ):
            with pytest.raises(GeocodingRequestError, match="Unexpected"):
                await resolver.search("Bandra")


class TestResolve:
    """Tests for the non-raising resolve method."""

    async def test_success(self, resolver, places_payload):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            return_value=json_response(places_payload),
        ):
            lookup = await resolver.resolve("Bandra")

        assert not lookup.failed
        assert not lookup.is_empty
        assert len(lookup.candidates) == 2
        assert lookup.query == "Bandra"

    async def test_no_matches_is_empty_not_failed(self, resolver):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            return_value=json_response([]),
        ):
            lookup = await resolver.resolve("Atlantis")

        assert lookup.is_empty
        assert not lookup.failed
        assert lookup.error is None

    async def test_network_failure_becomes_failed_lookup(self, resolver):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            side_effect=httpx.ConnectError("Connection refused"),
        ):
            lookup = await resolver.resolve("Bandra")

        assert lookup.failed
        assert lookup.candidates == ()
        assert lookup.error == SEARCH_FAILED_MESSAGE

    async def test_malformed_payload_becomes_failed_lookup(self, resolver):
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            return_value=json_response([{"unexpected": 1}, "garbage"]),
        ):
            lookup = await resolver.resolve("Bandra")

        assert lookup.failed
        assert lookup.error == SEARCH_FAILED_MESSAGE

    async def test_invalid_url_becomes_failed_lookup(self):
        resolver = PlaceResolver(PlaceResolverConfig(url="http://geocoder:notaport"))

        lookup = await resolver.resolve("Bandra")

        assert lookup.failed
        assert lookup.candidates == ()

    async def test_single_attempt_per_call(self, resolver):
        """Failures are not retried."""
        with patch.object(
            httpx.AsyncClient,
            "get",
            new_callable=AsyncMock,
            side_effect=httpx.ConnectError("Connection refused"),
        ) as mock_get:
            await resolver.resolve("Bandra")

        assert mock_get.call_count == 1
