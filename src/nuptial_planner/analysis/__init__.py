"""Feature derivation and flight scoring.

Each module is a pure function layer over datasource models. No I/O, no
HTTP, no Prefect decorators.

Modules:
  - weather_features: hourly series -> daily aggregates + trend scalars
  - sightings_boost: sightings log -> per-day local activity boost
  - features: FeatureVector shared by both models
  - flight_model: environmental probability + per-taxon relative shares
  - flight_forecast: ranked PredictionDay list for a location

Adding a scoring factor
-----------------------
1. Add the fit function to ``flight_model.py`` and a weight to
   ``ENV_WEIGHTS`` and/or ``TAXON_WEIGHTS``.
2. If it needs a new input, extend ``FeatureVector`` and
   ``flight_forecast.build_features``.
3. Add tests in ``tests/test_flight_model.py``.
"""

from nuptial_planner.analysis.features import FeatureVector
from nuptial_planner.analysis.flight_forecast import assemble_forecast, build_features, rank_taxa
from nuptial_planner.analysis.flight_model import (
    environmental_probability,
    relative_taxon_shares,
    taxon_score,
)
from nuptial_planner.analysis.sightings_boost import haversine_km, sightings_boost
from nuptial_planner.analysis.weather_features import (
    DailyAggregate,
    TrendScalars,
    daily_aggregates,
    hours_since_last_rain,
    pressure_trend_last_24,
    trend_scalars,
)

__all__ = [
    "DailyAggregate",
    "FeatureVector",
    "TrendScalars",
    "assemble_forecast",
    "build_features",
    "daily_aggregates",
    "environmental_probability",
    "haversine_km",
    "hours_since_last_rain",
    "pressure_trend_last_24",
    "rank_taxa",
    "relative_taxon_shares",
    "sightings_boost",
    "taxon_score",
    "trend_scalars",
]
