"""Flight probability models.

Both models are fixed heuristics, not fitted:

  - ``environmental_probability``: taxon-agnostic chance that conditions
    suit flights at all, a weighted sum of six fits pushed through a
    sigmoid.
  - ``relative_taxon_shares``: per-taxon scores from each profile's own
    response parameters, softmax-normalized across the catalog.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from nuptial_planner.reference.taxa import TAXON_CATALOG

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nuptial_planner.analysis.features import FeatureVector
    from nuptial_planner.reference.taxa import TaxonProfile

RAIN_WINDOW_HOURS = 72
RAIN_DECAY_HOURS = 24.0
WIND_THRESHOLD = 8.0
WIND_SPAN = 12.0
HUMIDITY_CENTER = 60.0

ENV_WEIGHTS = {
    "temperature": 1.0,
    "humidity": 0.8,
    "rain": 1.0,
    "wind": 0.9,
    "pressure": 0.3,
    "sightings": 0.6,
}
ENV_BIAS = -3.5

TAXON_WEIGHTS = {
    "temperature": 1.2,
    "humidity": 0.9,
    "rain": 1.0,
    "wind": 0.9,
    "season": 0.5,
}
OFF_SEASON_FACTOR = 0.3


def sigmoid(x: float) -> float:
    """Logistic function, stable for large ``|x|``."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def softmax(values: Sequence[float]) -> list[float]:
    """Normalize scores to a distribution (max-subtracted for stability)."""
    if not values:
        return []
    top = max(values)
    exps = [math.exp(v - top) for v in values]
    total = sum(exps) or 1.0
    return [e / total for e in exps]


def temperature_fit(tmax: float, optimum: float = 28.0, width: float = 6.0) -> float:
    """Gaussian kernel around the optimum temperature."""
    return math.exp(-((tmax - optimum) ** 2) / (2 * width**2))


def humidity_fit(rh_mean: float, slope: float = 0.12) -> float:
    """Logistic response centered at 60% RH."""
    return sigmoid(slope * (rh_mean - HUMIDITY_CENTER))


def rain_fit(hours_since_rain: int, scale: float = 0.9) -> float:
    """Exponential decay after rain; zero outside the 72 h window."""
    if hours_since_rain < RAIN_WINDOW_HOURS:
        return math.exp(-hours_since_rain / RAIN_DECAY_HOURS) * scale
    return 0.0


def wind_fit(wind_max: float) -> float:
    """1 at or below the threshold, linearly down to 0 over the next 12 units."""
    return max(0.0, 1 - max(0.0, wind_max - WIND_THRESHOLD) / WIND_SPAN)


def pressure_fit(pressure_trend: float) -> float:
    """Penalize fast pressure changes, never below 0.5."""
    return 1 - min(0.5, abs(pressure_trend) * 0.1)


def sightings_fit(boost: float) -> float:
    return min(1.0, boost * 0.25)


def environmental_probability(features: FeatureVector) -> float:
    """Global, taxon-agnostic flight probability in (0, 1)."""
    fits = {
        "temperature": temperature_fit(features.tmax),
        "humidity": humidity_fit(features.rh_mean),
        "rain": rain_fit(features.hours_since_rain),
        "wind": wind_fit(features.wind_max),
        "pressure": pressure_fit(features.pressure_trend),
        "sightings": sightings_fit(features.sightings_boost),
    }
    linear = sum(ENV_WEIGHTS[name] * value for name, value in fits.items()) + ENV_BIAS
    return sigmoid(linear)


def taxon_score(features: FeatureVector, profile: TaxonProfile) -> float:
    """Unnormalized flight propensity of one taxon."""
    season = 1.0 if profile.is_active_in(features.month) else OFF_SEASON_FACTOR
    return (
        TAXON_WEIGHTS["temperature"]
        * temperature_fit(features.tmax, profile.t_opt, profile.t_width)
        + TAXON_WEIGHTS["humidity"] * humidity_fit(features.rh_mean, profile.rh_k)
        + TAXON_WEIGHTS["rain"] * rain_fit(features.hours_since_rain, profile.rain_sens)
        + TAXON_WEIGHTS["wind"] * wind_fit(features.wind_max) * (1 - profile.wind_penalty)
        + TAXON_WEIGHTS["season"] * season
    )


def relative_taxon_shares(
    features: FeatureVector,
    catalog: Sequence[TaxonProfile] = TAXON_CATALOG,
) -> list[float]:
    """Softmax of taxon scores, aligned with ``catalog`` order, summing to 1."""
    return softmax([taxon_score(features, profile) for profile in catalog])
