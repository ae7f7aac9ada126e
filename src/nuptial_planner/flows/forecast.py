"""
Prefect flow that refreshes the forecast for the configured location.

Caches the hourly weather series in the store's live tier and writes the
ranked forecast to ``derived/forecast.json``.

Run locally:
    python -m nuptial_planner.flows.forecast

Run with Prefect dashboard:
    prefect server start &
    python -m nuptial_planner.flows.forecast
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from nuptial_planner.config import get_settings
from nuptial_planner.datasources.sightings import SightingsLog
from nuptial_planner.datasources.weather import (
    HourlyObservation,
    fetch_hourly,
    hourly_to_dict,
    parse_hourly,
)
from nuptial_planner.errors import WeatherFetchError
from nuptial_planner.forecaster import ForecastService, clamp_days
from nuptial_planner.schemas import ForecastResult
from nuptial_planner.store import DataStore

# Data store with tiered directories
store = DataStore(get_settings().data_dir)

# Relative paths within the store
HOURLY_WEATHER_PATH = Path("live/hourly_weather.json")
FORECAST_PATH = Path("derived/forecast.json")


@task(name="fetch-hourly-weather", retries=2, retry_delay_seconds=5)
def fetch_hourly_weather(
    lat: float, lon: float, hours_back: int, hours_forward: int
) -> dict[str, Any]:
    """Fetch the hourly series from Open-Meteo in columnar form."""
    return hourly_to_dict(fetch_hourly(lat, lon, hours_back, hours_forward))


@task(name="save-hourly-weather")
def save_hourly_weather(
    hourly: dict[str, Any], lat: float, lon: float, hours_forward: int
) -> Path:
    """Cache the hourly series for an hour."""
    return store.write(
        HOURLY_WEATHER_PATH,
        hourly,
        source="open-meteo.com",
        valid_until=datetime.now(UTC) + timedelta(hours=1),
        location={"lat": lat, "lon": lon},
        hours_forward=hours_forward,
    )


def load_cached_hourly(lat: float, lon: float, hours_forward: int) -> dict[str, Any] | None:
    """Return the cached series if it is fresh and covers this request."""
    if not store.is_fresh(HOURLY_WEATHER_PATH):
        return None
    envelope = store.read_raw(HOURLY_WEATHER_PATH) or {}
    meta = envelope.get("meta", {})
    if meta.get("location") != {"lat": lat, "lon": lon}:
        return None
    if meta.get("hours_forward", 0) < hours_forward:
        return None
    data: dict[str, Any] | None = envelope.get("data")
    return data


@task(name="compute-forecast")
def compute_forecast(
    lat: float,
    lon: float,
    days: int,
    hourly: list[HourlyObservation] | None,
) -> ForecastResult:
    """Run the forecast on the fetched series (synthetic if ``hourly`` is None)."""

    def cached(*_args: object) -> list[HourlyObservation]:
        if hourly is None:
            msg = "no live weather for this run"
            raise WeatherFetchError(msg)
        return hourly

    service = ForecastService(
        SightingsLog.load(store),
        fetcher=cached,
        lookback_hours=get_settings().lookback_hours,
    )
    return service.forecast(lat, lon, days)


@task(name="save-forecast")
def save_forecast(result: ForecastResult) -> Path:
    """Save the forecast via store."""
    return store.write(
        FORECAST_PATH,
        result.model_dump(mode="json"),
        source="nuptial-planner",
        location={"lat": result.lat, "lon": result.lon},
        weather_source=result.weather_source,
    )


@flow(name="forecast", log_prints=True)
def forecast_all(
    lat: float | None = None,
    lon: float | None = None,
    days: int | None = None,
) -> dict[str, Any]:
    """
    Fetch weather (or reuse the cache) and write the forecast.

    This is the main Prefect flow. Weather failures fall back to the
    synthetic series and are reported, not raised.
    """
    settings = get_settings()
    lat = settings.lat if lat is None else lat
    lon = settings.lon if lon is None else lon
    applied, notice = clamp_days(
        settings.default_days if days is None else days, settings.max_forecast_days
    )
    if notice is not None:
        print(notice.message)
    hours_forward = applied * 24

    hourly: list[HourlyObservation] | None
    cached = load_cached_hourly(lat, lon, hours_forward)
    try:
        if cached is not None:
            print("Hourly weather is fresh, skipping fetch.")
            hourly = parse_hourly({"hourly": cached})
        else:
            print(f"Fetching hourly weather for ({lat}, {lon})...")
            raw = fetch_hourly_weather(lat, lon, settings.lookback_hours, hours_forward)
            save_hourly_weather(raw, lat, lon, hours_forward)
            hourly = parse_hourly({"hourly": raw})
    except WeatherFetchError as exc:
        print(f"Warning: weather unavailable ({exc}). Forecasting on synthetic weather.")
        hourly = None

    result = compute_forecast(lat, lon, applied, hourly)
    output_path = save_forecast(result)
    print(f"Saved {len(result.days)} forecast days to {output_path}")

    return {
        "days": len(result.days),
        "weather_source": result.weather_source,
        "output": str(output_path),
    }


if __name__ == "__main__":
    result = forecast_all()
    print(f"Flow complete: {result}")
