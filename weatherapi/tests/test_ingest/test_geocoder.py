"""Tests for the geocoder with mocked httpx."""

import httpx
import pytest
import respx

from weatherapi.errors import CityNotFoundError, UpstreamFetchError
from weatherapi.ingest.geocoder import Geocoder
from weatherapi.models.common import Err, Ok
from weatherapi.models.weather import Coordinates

GEOCODE_URL = "https://test-owm.example.com/geo/1.0/direct"


async def _resolve(city: str):
    async with httpx.AsyncClient() as http:
        geocoder = Geocoder(http, "test-key", geocode_url=GEOCODE_URL)
        return await geocoder.resolve(city)


class TestResolve:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success(self, geocode_seoul: list):
        respx.get(GEOCODE_URL).mock(
            return_value=httpx.Response(200, json=geocode_seoul)
        )
        result = await _resolve("Seoul")
        assert isinstance(result, Ok)
        assert result.value == Coordinates(latitude=37.5665, longitude=126.978)

    @pytest.mark.asyncio
    @respx.mock
    async def test_query_params(self, geocode_seoul: list):
        route = respx.get(GEOCODE_URL).mock(
            return_value=httpx.Response(200, json=geocode_seoul)
        )
        await _resolve("서울")
        assert route.call_count == 1
        params = route.calls[0].request.url.params
        assert params["q"] == "서울"
        assert params["limit"] == "1"
        assert params["appid"] == "test-key"

    @pytest.mark.asyncio
    @respx.mock
    async def test_takes_first_match(self, geocode_seoul: list):
        second = dict(geocode_seoul[0], lat=1.0, lon=2.0)
        respx.get(GEOCODE_URL).mock(
            return_value=httpx.Response(200, json=[geocode_seoul[0], second])
        )
        result = await _resolve("Seoul")
        assert result.unwrap().latitude == 37.5665

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_result_is_not_found(self):
        respx.get(GEOCODE_URL).mock(return_value=httpx.Response(200, json=[]))
        result = await _resolve("Atlantis")
        assert isinstance(result, Err)
        assert isinstance(result.error, CityNotFoundError)
        assert result.error.city == "Atlantis"
        with pytest.raises(CityNotFoundError):
            result.unwrap()

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_error(self):
        respx.get(GEOCODE_URL).mock(
            return_value=httpx.Response(401, json={"cod": 401, "message": "Invalid API key"})
        )
        result = await _resolve("Seoul")
        assert isinstance(result, Err)
        assert isinstance(result.error, UpstreamFetchError)
        assert "Invalid API key" not in result.error.message

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error(self):
        respx.get(GEOCODE_URL).mock(side_effect=httpx.ConnectError("boom"))
        result = await _resolve("Seoul")
        assert isinstance(result, Err)
        assert isinstance(result.error, UpstreamFetchError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_unexpected_shape(self):
        respx.get(GEOCODE_URL).mock(
            return_value=httpx.Response(200, json={"cod": "400"})
        )
        result = await _resolve("Seoul")
        assert isinstance(result, Err)
        assert isinstance(result.error, UpstreamFetchError)
