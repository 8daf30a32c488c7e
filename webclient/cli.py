"""CLI entry point for the weather web client."""

import argparse
import asyncio
import json
import logging

from webclient.config.loader import get_config_value, load_config
from webclient.helpers.client_helper import HttpClientHelper
from webclient.helpers.token_provider import ClientCredentialsTokenProvider
from webclient.models.forecast import WeatherForecast

DEFAULT_CONFIG = "configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="webclient",
        description="Weather forecast web client",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    forecast_p = sub.add_parser("forecast", help="Fetch forecasts once")
    forecast_p.add_argument(
        "--query", default="", help="Query string appended to the forecast URL"
    )
    forecast_p.add_argument(
        "--json", action="store_true", help="Print raw JSON instead of a table"
    )

    # token
    sub.add_parser("token", help="Acquire an access token and report it")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. azure_ad.tenant")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "token":
        return _cmd_token(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_forecast(config, args) -> int:
    try:
        http_client = HttpClientHelper(config.forecast_url, config.azure_ad)
        forecasts = asyncio.run(
            http_client.get_item(args.query, response_type=list[WeatherForecast], default=[])
        )
    except Exception as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(json.dumps([f.model_dump(mode="json", by_alias=True) for f in forecasts], indent=2))
        return 0
    for f in forecasts:
        print(f"{f.date_formatted:>12}  {f.temperature_c:>4}C  {f.temperature_f:>4}F  {f.summary or ''}")
    print(f"{len(forecasts)} forecast(s) from {config.forecast_url}")
    return 0


def _cmd_token(config) -> int:
    provider = ClientCredentialsTokenProvider(config.azure_ad)
    try:
        token = provider.get_access_token()
    except Exception as e:
        print(f"Error: {e}")
        return 1
    print(f"Token acquired for {config.azure_ad.authority} ({len(token)} chars)")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1
