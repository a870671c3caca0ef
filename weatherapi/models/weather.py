"""Client-facing weather models.

Attribute names are snake_case; to_dict() renders the wire keys clients
already depend on (currentHumi, rainfall, snowfall, icon, ...).
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CurrentWeatherReport:
    weather_status: str
    detail_weather_status: str
    current_temp: str
    apparent_temp: str
    current_humidity: str
    min_temp: str
    max_temp: str
    wind_speed: str
    rainfall_rate: str
    snowfall_rate: str
    sunrise_time: str
    sunset_time: str
    icon_id: str

    def to_dict(self) -> dict[str, str]:
        return {
            "weatherStatus": self.weather_status,
            "detailWeatherStatus": self.detail_weather_status,
            "currentTemp": self.current_temp,
            "apparentTemp": self.apparent_temp,
            "currentHumi": self.current_humidity,
            "minTemp": self.min_temp,
            "maxTemp": self.max_temp,
            "windSpeed": self.wind_speed,
            "rainfall": self.rainfall_rate,
            "snowfall": self.snowfall_rate,
            "sunriseTime": self.sunrise_time,
            "sunsetTime": self.sunset_time,
            "icon": self.icon_id,
        }


@dataclass(frozen=True)
class ForecastEntry:
    forecast_time: str
    weather_status: str
    detail_weather_status: str
    current_temp: str
    apparent_temp: str
    current_humidity: str
    min_temp: str
    max_temp: str
    wind_speed: str
    rainfall_rate: str
    snowfall_rate: str
    icon_id: str

    def to_dict(self) -> dict[str, str]:
        return {
            "forecastTime": self.forecast_time,
            "weatherStatus": self.weather_status,
            "detailWeatherStatus": self.detail_weather_status,
            "currentTemp": self.current_temp,
            "apparentTemp": self.apparent_temp,
            "currentHumi": self.current_humidity,
            "minTemp": self.min_temp,
            "maxTemp": self.max_temp,
            "windSpeed": self.wind_speed,
            "rainfall": self.rainfall_rate,
            "snowfall": self.snowfall_rate,
            "icon": self.icon_id,
        }


# Calendar date -> entries in upstream (chronological) order.
GroupedForecast: TypeAlias = dict[str, list[ForecastEntry]]


def grouped_forecast_to_dict(grouped: GroupedForecast) -> dict[str, list[dict[str, str]]]:
    return {day: [entry.to_dict() for entry in entries] for day, entries in grouped.items()}
