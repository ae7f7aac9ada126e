"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from nuptial_planner import __version__
from nuptial_planner.config import get_settings
from nuptial_planner.datasources.sightings import SightingsLog
from nuptial_planner.datasources.weather import HourlyObservation
from nuptial_planner.errors import ForecastError, WeatherFetchError
from nuptial_planner.flows.forecast import forecast_all
from nuptial_planner.forecaster import ForecastService
from nuptial_planner.store import DataStore


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="nuptial-planner",
        description="Daily nuptial flight forecasts for ant taxa",
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
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'forecast' command
    forecast_parser = subparsers.add_parser("forecast", help="Forecast flights for a location")
    forecast_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    forecast_parser.add_argument("--lon", type=float, default=None, help="Longitude")
    forecast_parser.add_argument(
        "--days", type=int, default=None, help="Days to forecast (default: 7, max 16)"
    )
    forecast_parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the weather API and use the synthetic series",
    )
    forecast_parser.add_argument(
        "--json", action="store_true", help="Print JSON instead of a table"
    )

    # 'sightings' command group
    sightings_parser = subparsers.add_parser("sightings", help="Record or list sightings")
    sightings_sub = sightings_parser.add_subparsers(dest="sightings_command")

    add_parser = sightings_sub.add_parser("add", help="Record a sighting")
    add_parser.add_argument("--lat", type=float, default=None, help="Latitude (required)")
    add_parser.add_argument("--lon", type=float, default=None, help="Longitude (required)")
    add_parser.add_argument("--genus", type=str, default=None)
    add_parser.add_argument("--species", type=str, default=None)
    add_parser.add_argument("--confidence", type=float, default=None, help="0-1 (default: 0.7)")
    add_parser.add_argument(
        "--datetime", type=str, default=None, help="ISO timestamp (default: now)"
    )

    sightings_sub.add_parser("list", help="List sightings, newest first")

    # 'refresh' command - run the Prefect forecast flow
    subparsers.add_parser("refresh", help="Fetch weather and write data/derived/forecast.json")

    return parser


def _offline_fetcher(*_args: object) -> list[HourlyObservation]:
    msg = "offline mode"
    raise WeatherFetchError(msg)


def _service(offline: bool = False) -> ForecastService:
    settings = get_settings()
    sightings = SightingsLog.load(DataStore(settings.data_dir))
    return ForecastService(
        sightings,
        fetcher=_offline_fetcher if offline else None,
        lookback_hours=settings.lookback_hours,
        max_days=settings.max_forecast_days,
    )


def _print_validation_error(exc: ValidationError) -> None:
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "input"
        print(f"Error: {field}: {err['msg']}", file=sys.stderr)


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Location: ({settings.lat}, {settings.lon})")
    print(f"Data dir: {settings.data_dir}")
    return 0


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    settings = get_settings()
    lat = settings.lat if args.lat is None else args.lat
    lon = settings.lon if args.lon is None else args.lon
    days = settings.default_days if args.days is None else args.days

    try:
        result = _service(offline=args.offline).forecast(lat, lon, days)
    except ValidationError as exc:
        _print_validation_error(exc)
        return 2
    except ForecastError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if result.notice is not None:
        print(f"Note: {result.notice.message}", file=sys.stderr)

    if args.json:
        print(json.dumps(result.payload(), indent=2))
        return 0

    print(f"Forecast for ({result.lat}, {result.lon}) [weather: {result.weather_source}]")
    for day in result.days:
        ranked = ", ".join(
            f"{' '.join(filter(None, [t.genus, t.species]))} {t.probability:.3f}" for t in day.top5
        )
        print(f"  {day.date.isoformat()}  {ranked}")
    return 0


def cmd_sightings(args: argparse.Namespace) -> int:
    """Handle the 'sightings add' and 'sightings list' commands."""
    service = _service()

    if args.sightings_command == "add":
        payload = {
            key: value
            for key, value in {
                "lat": args.lat,
                "lon": args.lon,
                "genus": args.genus,
                "species": args.species,
                "confidence": args.confidence,
                "datetime": args.datetime,
            }.items()
            if value is not None
        }
        try:
            ack = service.submit_sighting(payload)
        except ValidationError as exc:
            _print_validation_error(exc)
            return 2
        print(f"Sighting {ack['status']}.")
        return 0

    if args.sightings_command == "list":
        print(json.dumps(service.list_sightings(), indent=2))
        return 0

    print("Usage: nuptial-planner sightings {add,list}", file=sys.stderr)
    return 1


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: run the forecast flow."""
    settings = get_settings()
    print(f"Forecasting for ({settings.lat}, {settings.lon})...")
    result = forecast_all(lat=settings.lat, lon=settings.lon, days=settings.default_days)
    print(f"Done: {result.get('days', 0)} days written to {result.get('output')}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    level = logging.DEBUG if args.debug or settings.debug else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "forecast": cmd_forecast,
        "sightings": cmd_sightings,
        "refresh": cmd_refresh,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
