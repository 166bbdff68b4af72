"""Tests for place name resolution."""

from __future__ import annotations

import httpx
import pytest
import respx
from pydantic import ValidationError

from weather_insert.exceptions import LocationNotFoundError, WeatherAPIError, WeatherParseError
from weather_insert.geocoding import resolve
from weather_insert.models.geo import GeocodingResponse, GeoResult
from tests.conftest import GEOCODING_URL, SAMPLE_GEOCODING, SAMPLE_GEOCODING_NO_REGION


class TestResolve:
    @respx.mock
    @pytest.mark.asyncio
    async def test_success(self) -> None:
        respx.get(GEOCODING_URL).mock(return_value=httpx.Response(200, json=SAMPLE_GEOCODING))
        geo = await resolve("London")
        assert isinstance(geo, GeoResult)
        assert geo.latitude == 51.5
        assert geo.longitude == -0.12
        assert geo.name == "London"
        assert geo.country == "United Kingdom"
        assert geo.admin1 == "England"
        assert geo.label == "London, England"

    @respx.mock
    @pytest.mark.asyncio
    async def test_query_params(self) -> None:
        route = respx.get(GEOCODING_URL).mock(
            return_value=httpx.Response(200, json=SAMPLE_GEOCODING)
        )
        await resolve("New York")
        params = route.calls.last.request.url.params
        assert params["name"] == "New York"
        assert params["count"] == "1"
        assert params["language"] == "en"
        assert params["format"] == "json"

    @respx.mock
    @pytest.mark.asyncio
    async def test_label_falls_back_to_country(self) -> None:
        respx.get(GEOCODING_URL).mock(
            return_value=httpx.Response(200, json=SAMPLE_GEOCODING_NO_REGION)
        )
        geo = await resolve("Monaco")
        assert geo.admin1 is None
        assert geo.label == "Monaco, Monaco"

    @respx.mock
    @pytest.mark.asyncio
    async def test_no_results_key(self) -> None:
        respx.get(GEOCODING_URL).mock(
            return_value=httpx.Response(200, json={"generationtime_ms": 0.5})
        )
        with pytest.raises(LocationNotFoundError) as exc_info:
            await resolve("Atlantis Prime")
        message = str(exc_info.value)
        assert '"Atlantis Prime"' in message
        assert "city name" in message
        assert exc_info.value.location == "Atlantis Prime"

    @respx.mock
    @pytest.mark.asyncio
    async def test_empty_results(self) -> None:
        respx.get(GEOCODING_URL).mock(return_value=httpx.Response(200, json={"results": []}))
        with pytest.raises(LocationNotFoundError, match="Nowhere"):
            await resolve("Nowhere")

    @respx.mock
    @pytest.mark.asyncio
    async def test_malformed_result(self) -> None:
        respx.get(GEOCODING_URL).mock(
            return_value=httpx.Response(200, json={"results": [{"name": "London"}]})
        )
        with pytest.raises(WeatherParseError):
            await resolve("London")

    @respx.mock
    @pytest.mark.asyncio
    async def test_http_error_propagates(self) -> None:
        respx.get(GEOCODING_URL).mock(return_value=httpx.Response(503, text="unavailable"))
        with pytest.raises(WeatherAPIError):
            await resolve("London")


class TestGeocodingResponse:
    def test_results_typed(self) -> None:
        response = GeocodingResponse.model_validate(SAMPLE_GEOCODING)
        assert isinstance(response.results[0], GeoResult)
        assert response.results[0].label == "London, England"

    def test_malformed_result_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeocodingResponse.model_validate({"results": [{"name": "London"}]})


class TestGeoResultLabel:
    def test_region_preferred(self) -> None:
        geo = GeoResult(latitude=0, longitude=0, name="Austin", country="United States", admin1="Texas")
        assert geo.label == "Austin, Texas"

    def test_country_when_no_region(self) -> None:
        geo = GeoResult(latitude=0, longitude=0, name="Singapore", country="Singapore")
        assert geo.label == "Singapore, Singapore"

    def test_empty_region_treated_as_missing(self) -> None:
        geo = GeoResult(latitude=0, longitude=0, name="Vaduz", country="Liechtenstein", admin1="")
        assert geo.label == "Vaduz, Liechtenstein"

    def test_name_only(self) -> None:
        geo = GeoResult(latitude=0, longitude=0, name="Null Island")
        assert geo.label == "Null Island"
