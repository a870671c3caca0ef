"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherapi.config.defaults import (
    DEFAULT_CACHE_TTL_SECONDS,
    OPENWEATHER_BASE_URL,
    OPENWEATHER_GEOCODE_URL,
)


class OpenWeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = OPENWEATHER_BASE_URL
    geocode_url: str = OPENWEATHER_GEOCODE_URL
    units: str = "metric"
    lang: str = "kr"
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    ttl_seconds: int = Field(default=DEFAULT_CACHE_TTL_SECONDS, ge=1)
    max_entries: int = Field(default=1000, ge=1)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    utc_offset_hours: int = Field(default=9, ge=-12, le=14)
    date_format: str = "%Y-%m-%d"
    datetime_format: str = "%Y-%m-%d %H:%M:%S"


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)


class ServiceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    openweather: OpenWeatherConfig = OpenWeatherConfig()
    cache: CacheConfig = CacheConfig()
    display: DisplayConfig = DisplayConfig()
    server: ServerConfig = ServerConfig()
