"""Hourly weather (past + forecast window) from Open-Meteo Forecast API."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import requests

from nuptial_planner.datasources.weather.client import HOURLY_VARS, OPEN_METEO_API
from nuptial_planner.datasources.weather.models import HourlyObservation
from nuptial_planner.errors import WeatherFetchError
from nuptial_planner.services.http import session


def fetch_hourly(
    lat: float,
    lon: float,
    hours_back: int = 72,
    hours_forward: int = 48,
    *,
    now: datetime | None = None,
) -> list[HourlyObservation]:
    """
    Fetch hourly weather covering ``now - hours_back`` to ``now + hours_forward``.

    Open-Meteo serves whole days, so the series spans every hour of the
    first and last calendar dates of the window.

    Args:
        lat: Latitude.
        lon: Longitude.
        hours_back: Hours of past weather to include.
        hours_forward: Hours of forecast to include.
        now: Reference time (defaults to current UTC time).

    Returns:
        Chronological list of HourlyObservation.

    Raises:
        WeatherFetchError: On transport errors, HTTP errors or a payload
            without an hourly time axis.
    """
    now = now or datetime.now(UTC)
    start = now - timedelta(hours=hours_back)
    end = now + timedelta(hours=hours_forward)

    params: dict[str, str | float] = {
        "latitude": lat,
        "longitude": lon,
        "hourly": ",".join(HOURLY_VARS),
        "start_date": start.date().isoformat(),
        "end_date": end.date().isoformat(),
        "timezone": "UTC",
    }

    try:
        resp = session.get(OPEN_METEO_API, params=params)
        resp.raise_for_status()
        data: dict[str, Any] = resp.json()
    except (requests.RequestException, ValueError) as exc:
        msg = f"Open-Meteo request failed: {exc}"
        raise WeatherFetchError(msg) from exc

    return parse_hourly(data)


def parse_hourly(data: dict[str, Any]) -> list[HourlyObservation]:
    """Convert an Open-Meteo ``hourly`` payload into observations."""
    hourly = data.get("hourly") if isinstance(data, dict) else None
    if not isinstance(hourly, dict) or not isinstance(hourly.get("time"), list):
        msg = "No hourly data in Open-Meteo response"
        raise WeatherFetchError(msg)

    times: list[str] = hourly["time"]
    if not times:
        msg = "Open-Meteo returned an empty hourly series"
        raise WeatherFetchError(msg)

    def column(name: str) -> list[float | None]:
        values = hourly.get(name)
        if values is None:
            values = []
        if not isinstance(values, list):
            msg = f"Open-Meteo column {name!r} is not a list"
            raise WeatherFetchError(msg)
        for value in values:
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int | float)
            ):
                msg = f"Non-numeric value in Open-Meteo column {name!r}: {value!r}"
                raise WeatherFetchError(msg)
        # Pad short columns so every hour has a slot
        return values + [None] * (len(times) - len(values))

    temps = column("temperature_2m")
    humidity = column("relativehumidity_2m")
    precip = column("precipitation")
    wind = column("wind_speed_10m")
    pressure = column("pressure_msl")

    observations = []
    for i, time_str in enumerate(times):
        try:
            ts = datetime.fromisoformat(time_str)
        except (TypeError, ValueError) as exc:
            msg = f"Bad timestamp in Open-Meteo response: {time_str!r}"
            raise WeatherFetchError(msg) from exc
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=UTC)
        observations.append(
            HourlyObservation(
                time=ts,
                temperature_c=temps[i],
                humidity_pct=humidity[i],
                precipitation_mm=precip[i],
                wind_speed=wind[i],
                pressure_hpa=pressure[i],
            )
        )
    return observations
