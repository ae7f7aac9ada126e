"""Forecast inputs.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants (remote sources only)
    ├── models.py         # Dataclasses for records
    └── {feature}.py      # Fetch/load functions (one per concept)

Sources:
  - weather/    Open-Meteo hourly series with a synthetic fallback
  - sightings/  User-submitted sightings, append-only log

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``weather/`` for a remote API, ``sightings/`` for local state.

2. Write fetch functions that return dataclasses::

       from nuptial_planner.services.http import session

       def fetch_something(lat, lon) -> list[Something]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return parse_something(resp.json())

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Add tests in ``tests/test_{name}.py``.
"""
