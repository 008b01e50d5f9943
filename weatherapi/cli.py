"""CLI entry point for the forecast service."""

import argparse
import json
import logging

from pydantic import BaseModel

from weatherapi.cache.factory import build_cache_store
from weatherapi.config.loader import get_config_value, load_config_or_default
from weatherapi.errors import WeatherAPIError
from weatherapi.service.forecast_service import ForecastService

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapi",
        description="Cached Open-Meteo forecast service",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("forecast", help="Print the cached forecast")
    sub.add_parser("invalidate", help="Drop the cached forecast")
    sub.add_parser("purge", help="Delete expired cache entries")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print a config value")
    get_p.add_argument("key", help="Dotted key, e.g. cache.ttl_seconds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config_or_default(args.config)

    if args.command == "config":
        return _cmd_config(config, args)
    if args.command == "purge":
        return _cmd_purge(config)

    try:
        service = ForecastService.from_config(config)
    except WeatherAPIError as e:
        logger.error("Cannot start forecast service: %s", e)
        return 1

    if args.command == "forecast":
        return _cmd_forecast(service)
    elif args.command == "invalidate":
        return _cmd_invalidate(service)
    else:
        parser.print_help()
        return 1


def _cmd_forecast(service: ForecastService) -> int:
    try:
        data = service.get_forecast()
    except WeatherAPIError as e:
        logger.error("Forecast failed: %s", e)
        return 1
    print(json.dumps(data, indent=2))
    return 0


def _cmd_invalidate(service: ForecastService) -> int:
    try:
        removed = service.invalidate()
    except WeatherAPIError as e:
        logger.error("Invalidate failed: %s", e)
        return 1
    print(f"Invalidated {service.cache_key}: {'removed' if removed else 'not cached'}")
    return 0


def _cmd_purge(config) -> int:
    try:
        removed = build_cache_store(config.cache).purge_expired()
    except WeatherAPIError as e:
        logger.error("Purge failed: %s", e)
        return 1
    print(f"Purged {removed} expired cache entries")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        if isinstance(value, BaseModel):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    print("Use: config show | config get KEY")
    return 1
