"""Tests for the DataStore module."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from nuptial_planner.store import DataStore


class TestDataStoreInit:
    """Test DataStore initialization."""

    def test_creates_tier_paths(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.base == tmp_path
        assert store.live == tmp_path / "live"
        assert store.derived == tmp_path / "derived"


class TestDataStoreWrite:
    """Test writing data with metadata envelopes."""

    def test_write_creates_file(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        path = store.write(Path("live/weather.json"), {"temp": 20}, source="test")
        assert path.exists()

    def test_write_envelope_format(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        valid = datetime(2026, 3, 1, tzinfo=UTC)
        store.write(Path("live/weather.json"), {"temp": 20}, source="open-meteo", valid_until=valid)

        data = json.loads((tmp_path / "live" / "weather.json").read_text())
        assert data["meta"]["source"] == "open-meteo"
        assert "fetched_at" in data["meta"]
        assert data["meta"]["valid_until"] == valid.isoformat()
        assert data["data"] == {"temp": 20}

    def test_write_extra_params(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(
            Path("live/test.json"),
            {},
            source="test",
            location={"lat": 45.5, "lon": -122.6},
        )
        data = json.loads((tmp_path / "live" / "test.json").read_text())
        assert data["meta"]["location"] == {"lat": 45.5, "lon": -122.6}

    def test_write_creates_parent_dirs(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/deep/nested.json"), {}, source="test")
        assert (tmp_path / "derived" / "deep" / "nested.json").exists()

    def test_overwrite_leaves_no_temp_files(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/log.json"), {"n": 1}, source="test")
        store.write(Path("live/log.json"), {"n": 2}, source="test")
        assert [p.name for p in (tmp_path / "live").iterdir()] == ["log.json"]
        assert store.read(Path("live/log.json")) == {"n": 2}

    def test_write_outside_base_rejected(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        with pytest.raises(ValueError, match="escapes"):
            store.write(Path("../outside.json"), {}, source="test")


class TestDataStoreRead:
    """Test reading data from the store."""

    def test_read_returns_data_payload(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/test.json"), {"key": "value"}, source="test")
        assert store.read(Path("live/test.json")) == {"key": "value"}

    def test_read_missing_file(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.read(Path("nonexistent.json")) is None

    def test_read_raw_returns_full_envelope(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/test.json"), {"key": "value"}, source="test")
        result = store.read_raw(Path("live/test.json"))
        assert result is not None
        assert result["data"] == {"key": "value"}
        assert result["meta"]["source"] == "test"


class TestDataStoreIsFresh:
    """Test freshness checking."""

    def test_missing_file_not_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.is_fresh(Path("nonexistent.json")) is False

    def test_expired_file_not_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        past = datetime.now(UTC) - timedelta(hours=1)
        store.write(Path("live/test.json"), {}, source="test", valid_until=past)
        assert store.is_fresh(Path("live/test.json")) is False

    def test_future_valid_until_is_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        future = datetime.now(UTC) + timedelta(hours=6)
        store.write(Path("live/test.json"), {}, source="test", valid_until=future)
        assert store.is_fresh(Path("live/test.json")) is True

    def test_no_valid_until_not_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/test.json"), {}, source="test")
        assert store.is_fresh(Path("derived/test.json")) is False
