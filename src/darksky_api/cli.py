"""
Command-line interface for the Dark Sky client.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

import requests

from darksky_api import __version__
from darksky_api.chain import DarkSkyOptions, RequestChain
from darksky_api.client import DarkSkyClient
from darksky_api.config import get_settings
from darksky_api.errors import DarkSkyError
from darksky_api.schemas import EXCLUDE_ALL, Exclude, Language, Units

if TYPE_CHECKING:
    from darksky_api.schemas import Forecast

ONLY_CHOICES = [str(x) for x in EXCLUDE_ALL]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="darksky-api",
        description="Fetch forecasts from the Dark Sky API",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show settings")

    forecast_parser = subparsers.add_parser("forecast", help="Fetch a forecast")
    forecast_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    forecast_parser.add_argument("--lon", type=float, default=None, help="Longitude")
    forecast_parser.add_argument(
        "--time",
        type=str,
        default=None,
        help="Make a time machine request (epoch seconds or date string)",
    )
    forecast_parser.add_argument("--units", type=Units, choices=list(Units), default=None)
    forecast_parser.add_argument("--lang", type=Language, choices=list(Language), default=None)
    forecast_parser.add_argument(
        "--exclude",
        type=Exclude,
        choices=list(Exclude),
        nargs="+",
        default=[],
        help="Data blocks to leave out",
    )
    forecast_parser.add_argument(
        "--only",
        choices=ONLY_CHOICES,
        default=None,
        help="Keep only this time block",
    )
    forecast_parser.add_argument(
        "--extend-hourly",
        action="store_true",
        help="Return 168 hours of hourly data instead of 48",
    )

    return parser


def configure_logging(debug: bool) -> None:  # noqa: FBT001
    """Send package logs to stderr."""
    settings = get_settings()
    level = logging.DEBUG if debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"API: {settings.base_url}")
    print(f"API key set: {'yes' if settings.api_key else 'no'}")
    print(f"Units: {settings.units}")
    print(f"Language: {settings.lang}")
    print(f"Location: ({settings.lat}, {settings.lon})")
    return 0


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    settings = get_settings()
    if not settings.api_key:
        print("DARKSKY_API_KEY was not found in the environment.", file=sys.stderr)
        return 1

    lat = args.lat if args.lat is not None else settings.lat
    lon = args.lon if args.lon is not None else settings.lon
    options = DarkSkyOptions(units=args.units or settings.units, lang=args.lang or settings.lang)
    client = DarkSkyClient(settings.api_key, base_url=settings.base_url, timeout=settings.timeout)
    chain = RequestChain(settings.api_key, lat, lon, options, client=client)
    chain.exclude(*args.exclude)

    if args.only:
        only = {
            Exclude.CURRENTLY: chain.only_currently,
            Exclude.MINUTELY: chain.only_minutely,
            Exclude.HOURLY: chain.only_hourly,
            Exclude.DAILY: chain.only_daily,
        }
        only[Exclude(args.only)]()
    if args.extend_hourly:
        chain.extend_hourly()
    if args.time:
        chain.time(args.time)

    try:
        result = chain.execute()
    except (DarkSkyError, requests.RequestException) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print_forecast(result)
    return 0


def print_forecast(result: Forecast) -> None:
    """Print a short summary of a forecast."""
    print(f"Forecast for ({result.latitude}, {result.longitude}) [{result.timezone}]")
    print(f"API Calls: {result.headers.api_calls}")
    if result.flags is not None:
        print(f"Units: {result.flags.units}")
    if result.currently is not None:
        print(f"Currently: {result.currently.summary} {result.currently.temperature}")
    if result.daily is not None and result.daily.data:
        today = result.daily.data[0]
        print(f"Daily High: {today.temperature_high}")
        print(f"Daily Low: {today.temperature_low}")
    if result.alerts:
        print(f"Alerts: {len(result.alerts)}")


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "forecast": cmd_forecast,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
