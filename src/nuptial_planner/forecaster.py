"""Forecast and sightings service.

The entry point a transport layer (CLI, web handler) calls. Owns the
sightings log and the weather collaborator; validates input, clamps the
horizon, and runs the pure pipeline in ``analysis/``.

Usage::

    from nuptial_planner.forecaster import ForecastService

    service = ForecastService()
    result = service.forecast(45.5, -122.6, days=7)
    for day in result.days:
        print(day.date, [t.genus for t in day.top5])
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from nuptial_planner.analysis.flight_forecast import assemble_forecast
from nuptial_planner.datasources.sightings import Sighting, SightingsLog
from nuptial_planner.datasources.weather import HourlyFetcher, load_hourly_weather
from nuptial_planner.errors import ForecastError
from nuptial_planner.reference.forecast import (
    DEFAULT_FORECAST_DAYS,
    LOOKBACK_HOURS,
    MAX_FORECAST_DAYS,
)
from nuptial_planner.schemas import (
    ForecastNotice,
    ForecastRequest,
    ForecastResult,
    SightingSubmission,
)

logger = logging.getLogger(__name__)


def clamp_days(
    requested: int, maximum: int = MAX_FORECAST_DAYS
) -> tuple[int, ForecastNotice | None]:
    """Clamp a horizon to ``[1, maximum]``; notice only when it was too long."""
    applied = min(max(requested, 1), maximum)
    notice = None
    if requested > maximum:
        notice = ForecastNotice(requested_days=requested, applied_days=applied)
    return applied, notice


class ForecastService:
    """Runs forecasts against an injected sightings log and weather fetcher."""

    def __init__(
        self,
        sightings: SightingsLog | None = None,
        *,
        fetcher: HourlyFetcher | None = None,
        lookback_hours: int = LOOKBACK_HOURS,
        max_days: int = MAX_FORECAST_DAYS,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.sightings = sightings if sightings is not None else SightingsLog()
        self.fetcher = fetcher
        self.lookback_hours = lookback_hours
        self.max_days = max_days
        self._clock = clock

    def _now(self) -> datetime | None:
        return self._clock() if self._clock is not None else None

    def forecast(
        self, lat: float, lon: float, days: int = DEFAULT_FORECAST_DAYS
    ) -> ForecastResult:
        """
        Forecast ranked nuptial flight likelihoods for a location.

        Args:
            lat: Latitude in degrees.
            lon: Longitude in degrees.
            days: Requested horizon; clamped to ``[1, max_days]``.

        Returns:
            ForecastResult with one PredictionDay per date and, if the
            horizon was clamped, a notice carrying the original request.

        Raises:
            pydantic.ValidationError: Missing or non-numeric coordinates.
            ForecastError: Aggregation or scoring failed.
        """
        request = ForecastRequest.model_validate({"lat": lat, "lon": lon, "days": days})
        applied, notice = clamp_days(request.days, self.max_days)
        if notice is not None:
            logger.info(notice.message)

        hourly, source = load_hourly_weather(
            request.lat,
            request.lon,
            self.lookback_hours,
            applied * 24,
            fetcher=self.fetcher,
            now=self._now(),
        )
        snapshot = self.sightings.snapshot()

        try:
            days_out = assemble_forecast(request.lat, request.lon, hourly, applied, snapshot)
        except (ValueError, TypeError, ArithmeticError) as exc:
            msg = f"failed to compute predictions: {exc}"
            raise ForecastError(msg) from exc

        logger.debug(
            "Forecast for (%s, %s): %d days from %s weather, %d sightings",
            request.lat,
            request.lon,
            len(days_out),
            source,
            len(snapshot),
        )
        return ForecastResult(
            lat=request.lat,
            lon=request.lon,
            days=days_out,
            notice=notice,
            weather_source=str(source),
        )

    def submit_sighting(self, payload: dict[str, Any]) -> dict[str, str]:
        """Validate and store a sighting.

        Raises:
            pydantic.ValidationError: Missing or non-numeric coordinates,
                or an out-of-range confidence. Nothing is stored.
        """
        submission = SightingSubmission.model_validate(payload)
        self.sightings.append(
            Sighting(
                datetime=submission.datetime,
                lat=submission.lat,
                lon=submission.lon,
                genus=submission.genus,
                species=submission.species,
                confidence=submission.confidence,
            )
        )
        return {"status": "stored"}

    def list_sightings(self) -> list[dict[str, Any]]:
        """All stored sightings, newest first."""
        return [s.to_dict() for s in self.sightings.newest_first()]
