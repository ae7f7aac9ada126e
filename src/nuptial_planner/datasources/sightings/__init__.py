"""User-submitted sightings data source.

Public API:
  - models: Sighting, DEFAULT_CONFIDENCE
  - log: SightingsLog (append-only, snapshot reads, optional JSON persistence)
"""

from nuptial_planner.datasources.sightings.log import SIGHTINGS_PATH, SightingsLog
from nuptial_planner.datasources.sightings.models import DEFAULT_CONFIDENCE, Sighting

__all__ = [
    "DEFAULT_CONFIDENCE",
    "SIGHTINGS_PATH",
    "Sighting",
    "SightingsLog",
]
