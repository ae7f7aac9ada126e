"""Tests for the sightings datasource (model and append-only log)."""

from __future__ import annotations

import threading
from datetime import UTC, datetime
from pathlib import Path

from nuptial_planner.datasources.sightings import SIGHTINGS_PATH, Sighting, SightingsLog
from nuptial_planner.store import DataStore


def make(day: int, genus: str | None = "Lasius") -> Sighting:
    return Sighting(
        datetime=datetime(2026, 8, day, 18, tzinfo=UTC),
        lat=45.0,
        lon=-122.0,
        genus=genus,
    )


class TestSighting:
    """Test the Sighting dataclass."""

    def test_default_confidence(self) -> None:
        assert make(1).confidence == 0.7

    def test_dict_round_trip(self) -> None:
        s = Sighting(datetime(2026, 8, 1, tzinfo=UTC), 45.0, -122.0, "Camponotus", "modoc", 0.9)
        assert Sighting.from_dict(s.to_dict()) == s

    def test_naive_datetime_is_utc(self) -> None:
        s = Sighting(datetime(2026, 7, 9, 18), 45.5, -122.6)
        assert s.datetime == datetime(2026, 7, 9, 18, tzinfo=UTC)

    def test_aware_datetime_kept(self) -> None:
        moment = datetime(2026, 7, 9, 18, tzinfo=UTC)
        assert Sighting(moment, 45.5, -122.6).datetime is moment

    def test_from_dict_naive_datetime_is_utc(self) -> None:
        s = Sighting.from_dict({"datetime": "2026-08-01T12:00:00", "lat": 45, "lon": -122})
        assert s.datetime.tzinfo is UTC
        assert s.confidence == 0.7
        assert s.genus is None


class TestSightingsLog:
    """Test the in-memory log."""

    def test_starts_empty(self) -> None:
        log = SightingsLog()
        assert len(log) == 0
        assert log.snapshot() == ()

    def test_append_and_snapshot(self) -> None:
        log = SightingsLog()
        log.append(make(1))
        log.append(make(2))
        assert [s.datetime.day for s in log.snapshot()] == [1, 2]

    def test_snapshot_is_isolated_from_later_appends(self) -> None:
        log = SightingsLog([make(1)])
        snap = log.snapshot()
        log.append(make(2))
        assert len(snap) == 1
        assert len(log) == 2

    def test_newest_first(self) -> None:
        log = SightingsLog([make(3), make(9), make(1)])
        assert [s.datetime.day for s in log.newest_first()] == [9, 3, 1]

    def test_concurrent_appends_all_land(self) -> None:
        log = SightingsLog()

        def worker() -> None:
            for _ in range(50):
                log.append(make(5))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(log) == 400


class TestSightingsLogPersistence:
    """Test the store-backed log."""

    def test_append_writes_envelope(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        log = SightingsLog(store=store)
        log.append(make(4, genus="Myrmica"))

        envelope = store.read_raw(SIGHTINGS_PATH)
        assert envelope is not None
        assert envelope["meta"]["source"] == "user-submitted"
        assert envelope["data"]["sightings"][0]["genus"] == "Myrmica"

    def test_load_round_trip(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        log = SightingsLog(store=store)
        log.append(make(4))
        log.append(make(6, genus=None))

        reopened = SightingsLog.load(store)
        assert reopened.snapshot() == log.snapshot()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        assert len(SightingsLog.load(DataStore(tmp_path))) == 0
