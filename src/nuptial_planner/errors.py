"""Exception types raised by the forecasting engine."""

from __future__ import annotations


class NuptialPlannerError(Exception):
    """Base class for all package errors."""


class WeatherFetchError(NuptialPlannerError):
    """The hourly weather collaborator failed or returned unusable data."""


class ForecastError(NuptialPlannerError):
    """Aggregation or scoring failed for a forecast request."""
