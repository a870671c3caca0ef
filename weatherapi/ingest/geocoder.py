"""City name to coordinates via the OpenWeatherMap direct geocoding API."""

import logging

import httpx
from pydantic import ValidationError

from weatherapi.config.defaults import OPENWEATHER_GEOCODE_URL
from weatherapi.errors import CityNotFoundError, UpstreamFetchError
from weatherapi.models.common import Err, Ok, Result
from weatherapi.models.openweather import GeocodeMatch
from weatherapi.models.weather import Coordinates

logger = logging.getLogger(__name__)


class Geocoder:
    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str,
        geocode_url: str = OPENWEATHER_GEOCODE_URL,
        timeout: float = 30.0,
    ):
        self.http = http
        self.api_key = api_key
        self.geocode_url = geocode_url
        self.timeout = timeout

    async def resolve(self, city: str) -> Result[Coordinates]:
        """Resolve a city name to the coordinates of its first match.

        One request per call; results are not cached here.
        """
        params = {"q": city, "limit": 1, "appid": self.api_key}
        try:
            resp = await self.http.get(
                self.geocode_url, params=params, timeout=self.timeout
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Geocoding for city=%s returned %d: %s",
                city, e.response.status_code, e.response.text,
            )
            return Err(UpstreamFetchError())
        except (httpx.RequestError, ValueError) as e:
            logger.error("Geocoding request failed for city=%s: %s", city, e)
            return Err(UpstreamFetchError())

        if not isinstance(data, list):
            logger.error("Unexpected geocoding response for city=%s: %r", city, data)
            return Err(UpstreamFetchError())
        if not data:
            logger.info("No geocoding match for city=%s", city)
            return Err(CityNotFoundError(city))

        try:
            match = GeocodeMatch.model_validate(data[0])
        except ValidationError as e:
            logger.error("Invalid geocoding match for city=%s: %s", city, e)
            return Err(UpstreamFetchError())

        return Ok(Coordinates(latitude=match.lat, longitude=match.lon))
