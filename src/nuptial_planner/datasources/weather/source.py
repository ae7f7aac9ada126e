"""Fetch-or-synthesize entry point for the hourly weather series."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from enum import StrEnum

from nuptial_planner.datasources.weather.hourly import fetch_hourly
from nuptial_planner.datasources.weather.models import HourlyObservation
from nuptial_planner.datasources.weather.synthetic import floor_to_hour, synthetic_hourly_series
from nuptial_planner.errors import WeatherFetchError

logger = logging.getLogger(__name__)

HourlyFetcher = Callable[[float, float, int, int], list[HourlyObservation]]


class WeatherSource(StrEnum):
    """Where a forecast's weather series came from."""

    OPEN_METEO = "open-meteo"
    SYNTHETIC = "synthetic"


def _default_fetcher(
    lat: float, lon: float, hours_back: int, hours_forward: int
) -> list[HourlyObservation]:
    return fetch_hourly(lat, lon, hours_back, hours_forward)


def load_hourly_weather(
    lat: float,
    lon: float,
    hours_back: int,
    hours_forward: int,
    *,
    fetcher: HourlyFetcher | None = None,
    now: datetime | None = None,
) -> tuple[list[HourlyObservation], WeatherSource]:
    """
    Return the hourly series for a location, substituting the synthetic one on failure.

    Args:
        lat: Latitude.
        lon: Longitude.
        hours_back: Lookback hours.
        hours_forward: Forecast hours.
        fetcher: Live collaborator; ``None`` means Open-Meteo.
        now: Anchor for the synthetic series (defaults to current UTC hour).

    Returns:
        ``(series, source)`` tuple. Collaborator failures never propagate.
    """
    fetch = fetcher or _default_fetcher
    try:
        series = fetch(lat, lon, hours_back, hours_forward)
        if not series:
            msg = "empty hourly series"
            raise WeatherFetchError(msg)
        return series, WeatherSource.OPEN_METEO
    except WeatherFetchError as exc:
        logger.warning("Hourly weather fetch failed, using synthetic series: %s", exc)

    anchor = floor_to_hour(now or datetime.now(UTC))
    return synthetic_hourly_series(anchor, hours_back, hours_forward), WeatherSource.SYNTHETIC
