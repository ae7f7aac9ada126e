"""Append-only sightings log shared by all forecast requests.

Writers are serialized by a lock and each append publishes a new immutable
tuple, so readers holding a snapshot never see a partial write. When a
``DataStore`` is attached the log is mirrored to a JSON envelope after
every append.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING

from nuptial_planner.datasources.sightings.models import Sighting

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nuptial_planner.store import DataStore

SIGHTINGS_PATH = Path("live/sightings.json")


class SightingsLog:
    """Single-writer, multi-reader store of sightings."""

    def __init__(
        self,
        sightings: Iterable[Sighting] = (),
        *,
        store: DataStore | None = None,
        path: Path = SIGHTINGS_PATH,
    ) -> None:
        self._lock = threading.Lock()
        self._items: tuple[Sighting, ...] = tuple(sightings)
        self._store = store
        self._path = path

    @classmethod
    def load(cls, store: DataStore, path: Path = SIGHTINGS_PATH) -> SightingsLog:
        """Open the log persisted in ``store`` (empty if the file is missing)."""
        data = store.read(path) or {}
        records = data.get("sightings", []) if isinstance(data, dict) else []
        return cls((Sighting.from_dict(r) for r in records), store=store, path=path)

    def append(self, sighting: Sighting) -> None:
        """Add a sighting and, if backed by a store, persist the whole log."""
        with self._lock:
            items = (*self._items, sighting)
            if self._store is not None:
                self._store.write(
                    self._path,
                    {"sightings": [s.to_dict() for s in items]},
                    source="user-submitted",
                )
            self._items = items

    def snapshot(self) -> tuple[Sighting, ...]:
        """Immutable view of the log at this instant, in insertion order."""
        return self._items

    def newest_first(self) -> list[Sighting]:
        """All sightings sorted by datetime, most recent first."""
        return sorted(self._items, key=lambda s: s.datetime, reverse=True)

    def __len__(self) -> int:
        return len(self._items)
