"""Formatters turning raw OpenWeatherMap payloads into client-facing models."""

from datetime import UTC, datetime

from weatherapi.config.schema import DisplayConfig
from weatherapi.errors import MalformedPayloadError
from weatherapi.models.common import display_timezone
from weatherapi.models.openweather import (
    RawCondition,
    RawCurrentPayload,
    RawForecastItem,
    RawPrecipitation,
)
from weatherapi.models.weather import CurrentWeatherReport, ForecastEntry

DEFAULT_DISPLAY = DisplayConfig()


def format_current(
    raw: RawCurrentPayload, display: DisplayConfig = DEFAULT_DISPLAY
) -> CurrentWeatherReport:
    condition = _first_condition(raw.weather)
    return CurrentWeatherReport(
        weather_status=condition.main,
        detail_weather_status=condition.description,
        current_temp=format_temperature(raw.main.temp),
        apparent_temp=format_temperature(raw.main.feels_like),
        current_humidity=f"{raw.main.humidity}%",
        min_temp=format_temperature(raw.main.temp_min),
        max_temp=format_temperature(raw.main.temp_max),
        wind_speed=f"{raw.wind.speed:.2f}m/s",
        rainfall_rate=format_precipitation(raw.rain),
        snowfall_rate=format_precipitation(raw.snow),
        sunrise_time=format_unix_time(raw.sys.sunrise, display),
        sunset_time=format_unix_time(raw.sys.sunset, display),
        icon_id=condition.icon,
    )


def format_forecast_item(
    item: RawForecastItem, display: DisplayConfig = DEFAULT_DISPLAY
) -> ForecastEntry:
    condition = _first_condition(item.weather)
    return ForecastEntry(
        forecast_time=forecast_local_time(item, display).strftime(
            display.datetime_format
        ),
        weather_status=condition.main,
        detail_weather_status=condition.description,
        current_temp=format_temperature(item.main.temp),
        apparent_temp=format_temperature(item.main.feels_like),
        current_humidity=f"{item.main.humidity}%",
        min_temp=format_temperature(item.main.temp_min),
        max_temp=format_temperature(item.main.temp_max),
        wind_speed=f"{item.wind.speed:.2f}m/s",
        rainfall_rate=format_precipitation(item.rain),
        snowfall_rate=format_precipitation(item.snow),
        icon_id=condition.icon,
    )


def format_temperature(value: float) -> str:
    return f"{value:.2f}℃"


def format_precipitation(precip: RawPrecipitation | None) -> str:
    """Render the 1h volume as given by the provider, zero when absent."""
    value = precip.one_hour if precip is not None else None
    return f"{_plain_number(value or 0)}mm/h"


def format_unix_time(
    timestamp: int, display: DisplayConfig = DEFAULT_DISPLAY
) -> str:
    tz = display_timezone(display.utc_offset_hours)
    return datetime.fromtimestamp(timestamp, tz).strftime(display.datetime_format)


def forecast_local_time(
    item: RawForecastItem, display: DisplayConfig = DEFAULT_DISPLAY
) -> datetime:
    """Parse dt_txt (provider UTC) into the display timezone."""
    parsed = datetime.fromisoformat(item.dt_txt)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(display_timezone(display.utc_offset_hours))


def _first_condition(conditions: list[RawCondition]) -> RawCondition:
    if not conditions:
        raise MalformedPayloadError()
    return conditions[0]


def _plain_number(value: float) -> str:
    # 1.0 -> "1", 0.25 -> "0.25"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
