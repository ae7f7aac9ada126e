"""
Prefect flows for the forecast pipeline.

Flows:
- forecast: Fetch hourly weather, load sightings, write derived/forecast.json

Usage (local):
    python -m nuptial_planner.flows.forecast

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'forecast/default'
"""
