"""Tests for speedtype.core.settings – duration choices and the settings file."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from speedtype.core.settings import DEFAULT_DURATION, DURATIONS, SettingsStore, validate_duration


# ---------------------------------------------------------------------------
# Duration choices
# ---------------------------------------------------------------------------

class TestDurations:
    def test_durations_include_default(self):
        assert DEFAULT_DURATION in DURATIONS
        assert DURATIONS == (30, 60, 120, 300)

    def test_validate_supported(self):
        assert validate_duration(120) == 120

    def test_validate_unsupported(self):
        with pytest.raises(ValueError):
            validate_duration(45)

    @pytest.mark.parametrize("value", [60.0, True, "60", None])
    def test_validate_rejects_non_int(self, value):
        with pytest.raises(ValueError):
            validate_duration(value)


# ---------------------------------------------------------------------------
# SettingsStore – reading
# ---------------------------------------------------------------------------

class TestSettingsRead:
    def test_default_when_missing(self, tmp_path: Path):
        store = SettingsStore(path=tmp_path / "settings.json")
        assert store.get_duration() == DEFAULT_DURATION

    def test_invalid_json_fallback(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text("{invalid", encoding="utf-8")
        assert SettingsStore(path=path).get_duration() == DEFAULT_DURATION

    def test_unsupported_stored_value_fallback(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"duration_seconds": 17}), encoding="utf-8")
        assert SettingsStore(path=path).get_duration() == DEFAULT_DURATION

    def test_float_stored_value_fallback(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"duration_seconds": 120.0}), encoding="utf-8")
        assert SettingsStore(path=path).get_duration() == DEFAULT_DURATION

    def test_unstatable_path_fallback(self, tmp_path: Path):
        store = SettingsStore(path=tmp_path / ("x" * 300) / "settings.json")
        assert store.get_duration() == DEFAULT_DURATION

    def test_path_under_a_file_fallback(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        assert SettingsStore(path=blocker / "settings.json").get_duration() == DEFAULT_DURATION


# ---------------------------------------------------------------------------
# SettingsStore – writing
# ---------------------------------------------------------------------------

class TestSettingsWrite:
    def test_read_write(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        SettingsStore(path=path).set_duration(300)
        assert SettingsStore(path=path).get_duration() == 300

    def test_set_unsupported_raises(self, tmp_path: Path):
        store = SettingsStore(path=tmp_path / "settings.json")
        with pytest.raises(ValueError):
            store.set_duration(1)

    def test_preserves_unknown_keys(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"theme": "light"}), encoding="utf-8")
        SettingsStore(path=path).set_duration(30)
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "light", "duration_seconds": 30}

    def test_unwritable_location_ignored(self, tmp_path: Path):
        store = SettingsStore(path=tmp_path / ("x" * 300) / "settings.json")
        store.set_duration(30)
        assert store.get_duration() == DEFAULT_DURATION
