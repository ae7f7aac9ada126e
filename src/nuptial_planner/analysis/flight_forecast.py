"""Assemble ranked per-day nuptial flight forecasts.

For each daily aggregate the global environmental probability is split
across taxa by their relative shares. Probabilities are rounded to three
decimals before a stable sort, so equal rounded values keep catalog order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nuptial_planner.analysis.features import FeatureVector
from nuptial_planner.analysis.flight_model import environmental_probability, relative_taxon_shares
from nuptial_planner.analysis.sightings_boost import sightings_boost
from nuptial_planner.analysis.weather_features import daily_aggregates, trend_scalars
from nuptial_planner.reference.forecast import TOP_N_TAXA
from nuptial_planner.reference.taxa import TAXON_CATALOG
from nuptial_planner.schemas import PredictionDay, TaxonProbability

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nuptial_planner.analysis.weather_features import DailyAggregate, TrendScalars
    from nuptial_planner.datasources.sightings.models import Sighting
    from nuptial_planner.datasources.weather.models import HourlyObservation
    from nuptial_planner.reference.taxa import TaxonProfile


def build_features(
    lat: float,
    lon: float,
    day: DailyAggregate,
    trends: TrendScalars,
    sightings: Sequence[Sighting],
) -> FeatureVector:
    """Feature vector for one day at one location."""
    return FeatureVector(
        tmax=day.tmax,
        rh_mean=day.rh_mean,
        hours_since_rain=trends.hours_since_rain,
        wind_max=day.wind_max,
        pressure_trend=trends.pressure_trend,
        month=day.date.month,
        sightings_boost=sightings_boost(lat, lon, day.date, sightings),
    )


def rank_taxa(
    features: FeatureVector,
    catalog: Sequence[TaxonProfile] = TAXON_CATALOG,
    top_n: int = TOP_N_TAXA,
) -> list[TaxonProbability]:
    """Top taxa for a feature vector, highest probability first."""
    global_prob = environmental_probability(features)
    shares = relative_taxon_shares(features, catalog)
    scored = [
        TaxonProbability(
            genus=profile.genus,
            species=profile.species,
            probability=round(global_prob * share, 3),
        )
        for profile, share in zip(catalog, shares, strict=True)
    ]
    scored.sort(key=lambda t: t.probability, reverse=True)
    return scored[:top_n]


def assemble_forecast(
    lat: float,
    lon: float,
    hourly: Sequence[HourlyObservation],
    days: int,
    sightings: Sequence[Sighting] = (),
    catalog: Sequence[TaxonProfile] = TAXON_CATALOG,
) -> list[PredictionDay]:
    """
    Build the ranked forecast from an hourly series and a sightings snapshot.

    Args:
        lat: Target latitude.
        lon: Target longitude.
        hourly: Chronological hourly series (lookback + horizon).
        days: Number of calendar dates to forecast (already clamped).
        sightings: Snapshot of the sightings log.
        catalog: Taxon profiles to rank.

    Returns:
        One PredictionDay per available date, ascending.
    """
    trends = trend_scalars(hourly)
    forecast = []
    for day in daily_aggregates(hourly, days):
        features = build_features(lat, lon, day, trends, sightings)
        forecast.append(PredictionDay(date=day.date, top5=rank_taxa(features, catalog)))
    return forecast
