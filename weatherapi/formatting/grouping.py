"""Group 3-hourly forecast items by calendar date."""

from weatherapi.config.schema import DisplayConfig
from weatherapi.formatting.formatters import (
    DEFAULT_DISPLAY,
    forecast_local_time,
    format_forecast_item,
)
from weatherapi.models.openweather import RawForecastItem
from weatherapi.models.weather import GroupedForecast


def group_by_date(
    items: list[RawForecastItem], display: DisplayConfig = DEFAULT_DISPLAY
) -> GroupedForecast:
    """Bucket formatted entries by their local date.

    Keys appear in first-occurrence order and entries keep input order, so a
    chronological input yields chronological output.

    The date key is taken after dt_txt (provider UTC) is shifted into the
    display timezone, not from the dt_txt text itself. With the default UTC+9
    an item at "2024-05-01 18:00:00" lands under 2024-05-02, so buckets differ
    from grouping on the provider date unless display.utc_offset_hours is 0.
    """
    grouped: GroupedForecast = {}
    for item in items:
        day = forecast_local_time(item, display).strftime(display.date_format)
        grouped.setdefault(day, []).append(format_forecast_item(item, display))
    return grouped
