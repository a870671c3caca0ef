"""Weather API: FastAPI app exposing current weather and 5-day forecast by city."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException, Request

from weatherapi.cache.store import CacheStore, InMemoryCacheStore
from weatherapi.config.schema import ServiceConfig
from weatherapi.errors import CityNotFoundError, WeatherError
from weatherapi.models.common import Err
from weatherapi.models.weather import grouped_forecast_to_dict
from weatherapi.pipeline.orchestrator import WeatherOrchestrator, build_orchestrator

logger = logging.getLogger(__name__)


def create_app(
    config: ServiceConfig | None = None,
    http_client: httpx.AsyncClient | None = None,
    cache_store: CacheStore | None = None,
    orchestrator: WeatherOrchestrator | None = None,
) -> FastAPI:
    """Composition root.

    An injected http_client is left open on shutdown; one created here is
    closed with the app.
    """
    config = config or ServiceConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if orchestrator is not None:
            app.state.orchestrator = orchestrator
            yield
            return

        owns_client = http_client is None
        client = http_client or httpx.AsyncClient(
            timeout=config.openweather.timeout_seconds
        )
        store = cache_store or InMemoryCacheStore(
            max_entries=config.cache.max_entries
        )
        app.state.orchestrator = build_orchestrator(config, client, store)
        try:
            yield
        finally:
            if owns_client:
                await client.aclose()

    app = FastAPI(title="Weather API", version="0.1.0", lifespan=lifespan)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/weather/{city}")
    async def get_weather_by_city(city: str, request: Request):
        result = await request.app.state.orchestrator.get_weather_by_city(city)
        if isinstance(result, Err):
            raise _to_http_error(result.error, "Failed to fetch weather data")
        return result.value.to_dict()

    @app.get("/weather/{city}/forecast")
    async def get_five_day_forecast(city: str, request: Request):
        result = await request.app.state.orchestrator.get_five_day_forecast(city)
        if isinstance(result, Err):
            raise _to_http_error(result.error, "Failed to fetch forecast data")
        return grouped_forecast_to_dict(result.value)

    return app


def _to_http_error(error: WeatherError, internal_message: str) -> HTTPException:
    if isinstance(error, CityNotFoundError):
        return HTTPException(404, error.message)
    logger.warning("Returning 500 for %s: %s", type(error).__name__, error)
    return HTTPException(500, internal_message)
