"""CLI entry point for the weather API service."""

import argparse
import asyncio
import json
import logging

import httpx

from weatherapi.cache.store import InMemoryCacheStore
from weatherapi.config.loader import get_config_value, load_config
from weatherapi.config.schema import ServiceConfig
from weatherapi.models.common import Err
from weatherapi.models.weather import grouped_forecast_to_dict
from weatherapi.pipeline.orchestrator import build_orchestrator


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapi",
        description="Current weather and 5-day forecast by city",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--env-file", default=None, help="Env file path")

    sub = parser.add_subparsers(dest="command")

    current_p = sub.add_parser("current", help="Show current weather for a city")
    current_p.add_argument("city")

    forecast_p = sub.add_parser("forecast", help="Show 5-day forecast for a city")
    forecast_p.add_argument("city")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print a config value")
    get_p.add_argument("key", help="Dotted key, e.g. cache.ttl_seconds")

    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config, env_file=args.env_file)

    if args.command == "current":
        return asyncio.run(_cmd_lookup(config, args.city, forecast=False))
    elif args.command == "forecast":
        return asyncio.run(_cmd_lookup(config, args.city, forecast=True))
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


async def _cmd_lookup(config: ServiceConfig, city: str, forecast: bool) -> int:
    async with httpx.AsyncClient(timeout=config.openweather.timeout_seconds) as http:
        store = InMemoryCacheStore(max_entries=config.cache.max_entries)
        orchestrator = build_orchestrator(config, http, store)
        if forecast:
            result = await orchestrator.get_five_day_forecast(city)
        else:
            result = await orchestrator.get_weather_by_city(city)

    if isinstance(result, Err):
        print(f"Error: {result.error.message}")
        return 1
    data = grouped_forecast_to_dict(result.value) if forecast else result.value.to_dict()
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


def _cmd_config(config: ServiceConfig, args) -> int:
    shown = config.model_copy(deep=True)
    if shown.openweather.api_key:
        shown.openweather.api_key = "***"

    if args.config_command == "show":
        print(shown.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(shown, args.key)
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return 1
        if hasattr(value, "model_dump_json"):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    print("Error: unknown config command")
    return 1


def _cmd_serve(config: ServiceConfig, args) -> int:
    import uvicorn

    from weatherapi.api import create_app

    uvicorn.run(
        create_app(config),
        host=args.host or config.server.host,
        port=args.port or config.server.port,
    )
    return 0
