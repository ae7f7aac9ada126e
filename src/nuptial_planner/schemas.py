"""
Request and response models for the forecasting service.

Pydantic models validate caller input before any processing and define the
serialized shape of forecasts. Engine internals use plain dataclasses.
"""

from __future__ import annotations

import datetime as dt
from datetime import UTC, date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nuptial_planner.datasources.sightings.models import DEFAULT_CONFIDENCE
from nuptial_planner.reference.forecast import DEFAULT_FORECAST_DAYS

StrictLatitude = Annotated[float, Field(strict=True, ge=-90, le=90)]
StrictLongitude = Annotated[float, Field(strict=True, ge=-180, le=180)]

# =============================================================================
# Requests
# =============================================================================


class ForecastRequest(BaseModel):
    """A forecast query: location plus horizon in days."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    days: int = DEFAULT_FORECAST_DAYS


class SightingSubmission(BaseModel):
    """A field sighting as submitted by a user.

    Coordinates must be real numbers; strings such as ``"45.0"`` are
    rejected.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    datetime: dt.datetime = Field(default_factory=lambda: dt.datetime.now(UTC))
    lat: StrictLatitude
    lon: StrictLongitude
    genus: str | None = None
    species: str | None = None
    confidence: Annotated[float, Field(strict=True, ge=0, le=1)] = DEFAULT_CONFIDENCE

    @field_validator("datetime")
    @classmethod
    def _assume_utc(cls, value: dt.datetime) -> dt.datetime:
        return value.replace(tzinfo=UTC) if value.tzinfo is None else value

    @field_validator("genus", "species")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        return value or None


# =============================================================================
# Responses
# =============================================================================


class TaxonProbability(BaseModel):
    """One ranked taxon on a forecast day."""

    genus: str
    species: str | None = None
    probability: float = Field(..., ge=0, le=1)


class PredictionDay(BaseModel):
    """Ranked taxa for one calendar date."""

    date: date
    top5: list[TaxonProbability] = Field(default_factory=list)


class ForecastNotice(BaseModel):
    """Out-of-band note that the requested horizon was clamped."""

    requested_days: int
    applied_days: int

    @property
    def message(self) -> str:
        return (
            f"Requested {self.requested_days} days; returned {self.applied_days} days "
            "(forecast limit)."
        )


class ForecastResult(BaseModel):
    """Forecast payload plus request metadata kept outside the payload."""

    lat: float
    lon: float
    days: list[PredictionDay] = Field(default_factory=list)
    notice: ForecastNotice | None = None
    weather_source: str

    def payload(self) -> list[dict[str, object]]:
        """The forecast itself, JSON-ready, without notice or metadata."""
        return [day.model_dump(mode="json") for day in self.days]
