"""Nuptial Planner - daily ant nuptial flight forecasts.

Architecture::

    datasources/   Inputs (Open-Meteo hourly weather, user sightings log)
    reference/     Static taxon catalog and forecast constants
    analysis/      Pure feature derivation and scoring (no I/O)
    forecaster.py  Service entry point: validation, clamping, weather fallback
    store.py       JSON envelope store with TTL (live cache, derived output)
    flows/         Prefect orchestration (refresh forecast for configured site)

Data flow: weather + sightings snapshot -> analysis -> ranked PredictionDay list
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from nuptial_planner.config import Settings

__all__ = ["Settings", "__version__"]
