"""Deterministic stand-in series used when live weather is unavailable.

Smooth sinusoids around mild flight-friendly conditions with a 3 mm rain
hour every 48 hours. The series depends only on its inputs, so forecasts
built on it are reproducible.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta

from nuptial_planner.datasources.weather.models import HourlyObservation


def floor_to_hour(moment: datetime) -> datetime:
    """Truncate a timestamp to the start of its UTC hour."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).replace(minute=0, second=0, microsecond=0)


def synthetic_hourly_series(
    anchor: datetime,
    hours_back: int = 72,
    hours_forward: int = 48,
) -> list[HourlyObservation]:
    """
    Build an hourly series for offsets ``-hours_back <= i < hours_forward``.

    Args:
        anchor: Time of offset 0 (floored to the hour).
        hours_back: Hours before the anchor.
        hours_forward: Hours from the anchor onwards.

    Returns:
        Chronological list of HourlyObservation.
    """
    start = floor_to_hour(anchor)
    series = []
    for i in range(-hours_back, hours_forward):
        # Only positive offsets land on the rain hour
        rains = i > 0 and i % 48 == 1
        series.append(
            HourlyObservation(
                time=start + timedelta(hours=i),
                temperature_c=26 + 6 * math.sin(i / 24),
                humidity_pct=55 + 15 * math.sin(i / 36),
                precipitation_mm=3.0 if rains else 0.0,
                wind_speed=8 + 4 * math.cos(i / 24),
                pressure_hpa=1013 + 2 * math.sin(i / 48),
            )
        )
    return series
