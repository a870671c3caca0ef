"""OpenWeatherMap current weather and 5-day forecast client.

Single attempt per call: any failure becomes an UpstreamFetchError with a
generic message and the provider detail goes to the log.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from weatherapi.config.defaults import OPENWEATHER_BASE_URL
from weatherapi.errors import UpstreamFetchError
from weatherapi.models.common import Err, Ok, Result
from weatherapi.models.openweather import RawCurrentPayload, RawForecastPayload
from weatherapi.models.weather import Coordinates

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class OpenWeatherClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = "metric",
        lang: str = "kr",
        timeout: float = 30.0,
    ):
        self.http = http
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.lang = lang
        self.timeout = timeout

    async def fetch_current(self, coords: Coordinates) -> Result[RawCurrentPayload]:
        return await self._fetch("weather", coords, RawCurrentPayload)

    async def fetch_forecast(self, coords: Coordinates) -> Result[RawForecastPayload]:
        """Fetch the 3-hourly forecast covering the next five days."""
        return await self._fetch("forecast", coords, RawForecastPayload)

    async def _fetch(
        self, endpoint: str, coords: Coordinates, model: type[PayloadT]
    ) -> Result[PayloadT]:
        url = f"{self.base_url}/{endpoint}"
        params = {
            "lat": coords.latitude,
            "lon": coords.longitude,
            "appid": self.api_key,
            "units": self.units,
            "lang": self.lang,
        }
        try:
            resp = await self.http.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return Ok(model.model_validate(resp.json()))
        except httpx.HTTPStatusError as e:
            logger.error(
                "OpenWeatherMap %s returned %d: %s",
                endpoint, e.response.status_code, e.response.text,
            )
        except httpx.RequestError as e:
            logger.error("OpenWeatherMap %s request failed: %s", endpoint, e)
        except ValidationError as e:
            logger.error("OpenWeatherMap %s payload rejected: %s", endpoint, e)
        except ValueError as e:
            logger.error("OpenWeatherMap %s returned invalid JSON: %s", endpoint, e)
        return Err(UpstreamFetchError())
