"""Hourly weather data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import date, datetime


@dataclass(frozen=True)
class HourlyObservation:
    """One hour of weather at a point (UTC, hour resolution)."""

    time: datetime
    temperature_c: float | None
    humidity_pct: float | None
    precipitation_mm: float | None
    wind_speed: float | None
    pressure_hpa: float | None

    @property
    def date(self) -> date:
        """Calendar date (UTC) this hour belongs to."""
        return self.time.date()


def hourly_to_dict(series: list[HourlyObservation]) -> dict[str, list[Any]]:
    """Columnar, Open-Meteo-shaped representation for caching."""
    return {
        "time": [obs.time.isoformat() for obs in series],
        "temperature_2m": [obs.temperature_c for obs in series],
        "relativehumidity_2m": [obs.humidity_pct for obs in series],
        "precipitation": [obs.precipitation_mm for obs in series],
        "wind_speed_10m": [obs.wind_speed for obs in series],
        "pressure_msl": [obs.pressure_hpa for obs in series],
    }
