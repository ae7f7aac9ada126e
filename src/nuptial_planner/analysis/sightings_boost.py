"""Spatiotemporal boost from recent nearby sightings.

Each sighting contributes ``confidence * exp(-km / 30) * exp(-age_days / 3)``
and the total is capped at 3.0.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime, time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from nuptial_planner.datasources.sightings.models import Sighting

EARTH_RADIUS_KM = 6371.0
DISTANCE_SCALE_KM = 30.0
AGE_SCALE_DAYS = 3.0
MAX_BOOST = 3.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def sighting_weight(lat: float, lon: float, day: date, sighting: Sighting) -> float:
    """Decayed, confidence-weighted contribution of one sighting."""
    distance = haversine_km(lat, lon, sighting.lat, sighting.lon)
    midnight = datetime.combine(day, time.min, tzinfo=UTC)
    age_days = max(0.0, (midnight - sighting.datetime).total_seconds() / 86400)
    return (
        sighting.confidence
        * math.exp(-distance / DISTANCE_SCALE_KM)
        * math.exp(-age_days / AGE_SCALE_DAYS)
    )


def sightings_boost(lat: float, lon: float, day: date, sightings: Iterable[Sighting]) -> float:
    """Sum of sighting weights for a location and date, clamped to [0, 3]."""
    total = sum(sighting_weight(lat, lon, day, s) for s in sightings)
    return min(total, MAX_BOOST)
