"""Per-day feature vector shared by the environmental and taxon models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureVector:
    """Flight-relevant features for one location and day."""

    tmax: float
    rh_mean: float
    hours_since_rain: int
    wind_max: float
    pressure_trend: float
    month: int
    sightings_boost: float = 0.0
