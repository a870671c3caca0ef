"""YAML config loader with env file resolution and dotted-key lookup."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from weatherapi.config.defaults import API_KEY_ENV_VAR, ENV_FILE_CANDIDATES
from weatherapi.config.schema import ServiceConfig

logger = logging.getLogger(__name__)


def resolve_env_file(base_dir: str | Path | None = None) -> Path | None:
    """Return the first existing env file relative to base_dir (default: cwd)."""
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    for candidate in ENV_FILE_CANDIDATES:
        path = base / candidate
        if path.is_file():
            return path
    return None


def load_config(
    path: str | Path | None = None,
    env_file: str | Path | None = None,
) -> ServiceConfig:
    """Load and validate config.

    Values come from the optional YAML file first. The env file (explicit, or
    resolved from the working directory) is loaded without overriding variables
    already set, and OPENWEATHER_API_KEY from the environment replaces the
    configured api key.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        # A section with every key commented out loads as None.
        raw = {section: values for section, values in raw.items() if values is not None}

    env_path = Path(env_file) if env_file is not None else resolve_env_file()
    if env_path is not None:
        logger.debug("Loading environment from %s", env_path)
        load_dotenv(env_path, override=False)

    api_key = os.environ.get(API_KEY_ENV_VAR)
    if api_key:
        section = raw.get("openweather") or {}
        section["api_key"] = api_key
        raw["openweather"] = section

    config = ServiceConfig(**raw)
    if not config.openweather.api_key:
        logger.warning("No OpenWeatherMap API key configured (%s)", API_KEY_ENV_VAR)
    return config


def get_config_value(config: ServiceConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'cache.ttl_seconds'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
