"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherapi.config.schema import OpenWeatherConfig, ServiceConfig
from weatherapi.models.openweather import RawCurrentPayload, RawForecastPayload

FIXTURE_DIR = Path(__file__).parent / "fixtures"

TEST_BASE_URL = "https://test-owm.example.com/data/2.5"
TEST_GEOCODE_URL = "https://test-owm.example.com/geo/1.0/direct"


def load_fixture(name: str):
    with open(FIXTURE_DIR / name, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def service_config() -> ServiceConfig:
    """Config pointing at mocked upstream URLs."""
    return ServiceConfig(
        openweather=OpenWeatherConfig(
            api_key="test-key",
            base_url=TEST_BASE_URL,
            geocode_url=TEST_GEOCODE_URL,
        )
    )


@pytest.fixture
def geocode_seoul() -> list:
    return load_fixture("geocode_seoul.json")


@pytest.fixture
def current_seoul() -> dict:
    return load_fixture("current_seoul.json")


@pytest.fixture
def forecast_seoul() -> dict:
    return load_fixture("forecast_seoul.json")


@pytest.fixture
def current_payload(current_seoul: dict) -> RawCurrentPayload:
    return RawCurrentPayload.model_validate(current_seoul)


@pytest.fixture
def forecast_payload(forecast_seoul: dict) -> RawForecastPayload:
    return RawForecastPayload.model_validate(forecast_seoul)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "openweather": {"lang": "en"},
        "cache": {"ttl_seconds": 120},
    }
    path = tmp_path / "service_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
