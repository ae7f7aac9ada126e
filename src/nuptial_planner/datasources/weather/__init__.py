"""Open-Meteo hourly weather data source.

Fetches the hourly series (lookback + forecast) used for flight features,
with a deterministic synthetic series when the API is unavailable.

Public API:
  - hourly: fetch_hourly, parse_hourly (Open-Meteo forecast API, hourly vars)
  - synthetic: synthetic_hourly_series (offline stand-in)
  - source: load_hourly_weather (fetch, falling back to synthetic)
  - models: HourlyObservation
  - client: API URL, shared constants
"""

from nuptial_planner.datasources.weather.client import HOURLY_VARS, OPEN_METEO_API
from nuptial_planner.datasources.weather.hourly import fetch_hourly, parse_hourly
from nuptial_planner.datasources.weather.models import HourlyObservation, hourly_to_dict
from nuptial_planner.datasources.weather.source import (
    HourlyFetcher,
    WeatherSource,
    load_hourly_weather,
)
from nuptial_planner.datasources.weather.synthetic import floor_to_hour, synthetic_hourly_series

__all__ = [
    "HOURLY_VARS",
    "OPEN_METEO_API",
    "HourlyFetcher",
    "HourlyObservation",
    "WeatherSource",
    "fetch_hourly",
    "hourly_to_dict",
    "floor_to_hour",
    "load_hourly_weather",
    "parse_hourly",
    "synthetic_hourly_series",
]
