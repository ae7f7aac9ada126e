"""Collapse an hourly weather series into daily aggregates and trend scalars.

Two request-wide scalars describe current conditions and are shared by
every forecast day:

  - hours since the last rain event (> 0.5 mm in an hour), 999 if none
  - pressure trend: OLS slope (hPa/hour) over the most recent 24 hours
"""

from __future__ import annotations

import statistics
from dataclasses import dataclass
from itertools import groupby
from typing import TYPE_CHECKING

from nuptial_planner.reference.forecast import (
    NO_RAIN_SENTINEL,
    PRESSURE_TREND_HOURS,
    RAIN_THRESHOLD_MM,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from nuptial_planner.datasources.weather.models import HourlyObservation

# Stand-ins for missing hourly values
_MISSING_TEMP_C = -999.0
_STANDARD_PRESSURE_HPA = 1013.0


@dataclass(frozen=True)
class DailyAggregate:
    """Weather summary for one calendar date."""

    date: date
    tmax: float
    rh_mean: float
    precip_sum: float
    wind_max: float
    pressure_mean: float


@dataclass(frozen=True)
class TrendScalars:
    """Request-wide current-conditions features."""

    hours_since_rain: int
    pressure_trend: float


def _require_series(hourly: Sequence[HourlyObservation]) -> None:
    if not hourly:
        msg = "hourly weather series is empty"
        raise ValueError(msg)


def _pressure(obs: HourlyObservation) -> float:
    return obs.pressure_hpa if obs.pressure_hpa is not None else _STANDARD_PRESSURE_HPA


def linear_slope(values: Sequence[float]) -> float:
    """Ordinary least-squares slope of ``values`` against 0, 1, 2, ...

    Returns 0.0 for fewer than two points or zero variance.
    """
    n = len(values)
    if n < 2:
        return 0.0
    x_mean = (n - 1) / 2
    y_mean = statistics.fmean(values)
    num = sum((i - x_mean) * (y - y_mean) for i, y in enumerate(values))
    den = sum((i - x_mean) ** 2 for i in range(n))
    return num / den if den else 0.0


def hours_since_last_rain(hourly: Sequence[HourlyObservation]) -> int:
    """Whole hours between the newest hour and the newest rain hour.

    Args:
        hourly: Chronological hourly series (non-empty).

    Returns:
        Hours (>= 0), or ``NO_RAIN_SENTINEL`` (999) if no hour exceeds
        the rain threshold.
    """
    _require_series(hourly)
    newest = hourly[-1].time
    for obs in reversed(hourly):
        if (obs.precipitation_mm or 0.0) > RAIN_THRESHOLD_MM:
            hours = (newest - obs.time).total_seconds() / 3600
            return max(0, round(hours))
    return NO_RAIN_SENTINEL


def pressure_trend_last_24(hourly: Sequence[HourlyObservation]) -> float:
    """Pressure slope (hPa/hour) over the last 24 hours of the series."""
    _require_series(hourly)
    recent = hourly[-PRESSURE_TREND_HOURS:]
    return linear_slope([_pressure(obs) for obs in recent])


def trend_scalars(hourly: Sequence[HourlyObservation]) -> TrendScalars:
    """Compute both request-wide scalars."""
    return TrendScalars(
        hours_since_rain=hours_since_last_rain(hourly),
        pressure_trend=pressure_trend_last_24(hourly),
    )


def daily_aggregates(hourly: Sequence[HourlyObservation], days: int) -> list[DailyAggregate]:
    """Group the series by UTC date and summarize the first ``days`` dates.

    Dates past the end of the series are simply absent, so the result may
    be shorter than ``days``.
    """
    _require_series(hourly)
    ordered = sorted(hourly, key=lambda obs: obs.date)

    aggregates: list[DailyAggregate] = []
    for day, group in groupby(ordered, key=lambda obs: obs.date):
        if len(aggregates) >= days:
            break
        hours = list(group)
        aggregates.append(
            DailyAggregate(
                date=day,
                tmax=max(
                    h.temperature_c if h.temperature_c is not None else _MISSING_TEMP_C
                    for h in hours
                ),
                rh_mean=statistics.fmean(h.humidity_pct or 0.0 for h in hours),
                precip_sum=sum(h.precipitation_mm or 0.0 for h in hours),
                wind_max=max(h.wind_speed or 0.0 for h in hours),
                pressure_mean=statistics.fmean(_pressure(h) for h in hours),
            )
        )
    return aggregates
