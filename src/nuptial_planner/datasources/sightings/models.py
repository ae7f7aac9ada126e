"""Field sighting model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

DEFAULT_CONFIDENCE = 0.7


@dataclass(frozen=True)
class Sighting:
    """A user-reported nuptial flight sighting."""

    datetime: datetime
    lat: float
    lon: float
    genus: str | None = None
    species: str | None = None
    confidence: float = DEFAULT_CONFIDENCE

    def __post_init__(self) -> None:
        # Naive datetimes are UTC
        if self.datetime.tzinfo is None:
            object.__setattr__(self, "datetime", self.datetime.replace(tzinfo=UTC))

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation."""
        return {
            "datetime": self.datetime.isoformat(),
            "lat": self.lat,
            "lon": self.lon,
            "genus": self.genus,
            "species": self.species,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Sighting:
        """Rebuild a sighting from ``to_dict`` output."""
        return cls(
            datetime=datetime.fromisoformat(data["datetime"]),
            lat=float(data["lat"]),
            lon=float(data["lon"]),
            genus=data.get("genus"),
            species=data.get("species"),
            confidence=float(data.get("confidence", DEFAULT_CONFIDENCE)),
        )
