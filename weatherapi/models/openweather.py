"""Raw OpenWeatherMap payload models.

Only the fields the formatters read are declared; everything else the
provider sends is ignored.
"""

from pydantic import BaseModel, Field


class GeocodeMatch(BaseModel):
    model_config = {"extra": "ignore"}

    name: str = ""
    lat: float
    lon: float
    country: str = ""


class RawCondition(BaseModel):
    model_config = {"extra": "ignore"}

    main: str
    description: str
    icon: str


class RawMain(BaseModel):
    model_config = {"extra": "ignore"}

    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int


class RawWind(BaseModel):
    model_config = {"extra": "ignore"}

    speed: float


class RawPrecipitation(BaseModel):
    """Rain or snow volume; absent means zero."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    one_hour: float | None = Field(default=None, alias="1h")


class RawSun(BaseModel):
    model_config = {"extra": "ignore"}

    sunrise: int
    sunset: int


class RawCurrentPayload(BaseModel):
    model_config = {"extra": "ignore"}

    weather: list[RawCondition] = Field(min_length=1)
    main: RawMain
    wind: RawWind
    rain: RawPrecipitation | None = None
    snow: RawPrecipitation | None = None
    sys: RawSun


class RawForecastItem(BaseModel):
    model_config = {"extra": "ignore"}

    dt_txt: str
    weather: list[RawCondition] = Field(min_length=1)
    main: RawMain
    wind: RawWind
    rain: RawPrecipitation | None = None
    snow: RawPrecipitation | None = None


class RawForecastPayload(BaseModel):
    model_config = {"extra": "ignore", "populate_by_name": True}

    items: list[RawForecastItem] = Field(default_factory=list, alias="list")
