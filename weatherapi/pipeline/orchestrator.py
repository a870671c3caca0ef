"""Weather orchestration: cache-aside around geocode, fetch and format."""

import logging

import httpx

from weatherapi.cache.cache_aside import get_or_compute
from weatherapi.cache.store import CacheStore
from weatherapi.config.defaults import DEFAULT_CACHE_TTL_SECONDS
from weatherapi.config.schema import DisplayConfig, ServiceConfig
from weatherapi.formatting.formatters import format_current
from weatherapi.formatting.grouping import group_by_date
from weatherapi.ingest.geocoder import Geocoder
from weatherapi.ingest.openweather_client import OpenWeatherClient
from weatherapi.models.common import Err, Ok, Result
from weatherapi.models.weather import CurrentWeatherReport, GroupedForecast

logger = logging.getLogger(__name__)

WEATHER_KEY_PREFIX = "weather_"
FORECAST_KEY_PREFIX = "forecast_"


class WeatherOrchestrator:
    """The two public read operations.

    Collaborators are injected; their lifetimes belong to the caller.
    """

    def __init__(
        self,
        geocoder: Geocoder,
        client: OpenWeatherClient,
        cache: CacheStore,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        display: DisplayConfig | None = None,
    ):
        self.geocoder = geocoder
        self.client = client
        self.cache = cache
        self.ttl_seconds = ttl_seconds
        self.display = display or DisplayConfig()

    async def get_weather_by_city(self, city: str) -> Result[CurrentWeatherReport]:
        async def compute() -> Result[CurrentWeatherReport]:
            coords = await self.geocoder.resolve(city)
            if isinstance(coords, Err):
                return coords
            raw = await self.client.fetch_current(coords.value)
            if isinstance(raw, Err):
                return raw
            logger.info("Fetched current weather for %s", city)
            return Ok(format_current(raw.value, self.display))

        return await get_or_compute(
            self.cache, f"{WEATHER_KEY_PREFIX}{city}", self.ttl_seconds, compute
        )

    async def get_five_day_forecast(self, city: str) -> Result[GroupedForecast]:
        async def compute() -> Result[GroupedForecast]:
            coords = await self.geocoder.resolve(city)
            if isinstance(coords, Err):
                return coords
            raw = await self.client.fetch_forecast(coords.value)
            if isinstance(raw, Err):
                return raw
            logger.info(
                "Fetched %d forecast items for %s", len(raw.value.items), city
            )
            return Ok(group_by_date(raw.value.items, self.display))

        return await get_or_compute(
            self.cache, f"{FORECAST_KEY_PREFIX}{city}", self.ttl_seconds, compute
        )


def build_orchestrator(
    config: ServiceConfig, http: httpx.AsyncClient, cache: CacheStore
) -> WeatherOrchestrator:
    ow = config.openweather
    geocoder = Geocoder(
        http, ow.api_key, geocode_url=ow.geocode_url, timeout=ow.timeout_seconds
    )
    client = OpenWeatherClient(
        http,
        ow.api_key,
        base_url=ow.base_url,
        units=ow.units,
        lang=ow.lang,
        timeout=ow.timeout_seconds,
    )
    return WeatherOrchestrator(
        geocoder,
        client,
        cache,
        ttl_seconds=config.cache.ttl_seconds,
        display=config.display,
    )
