"""Persisted user settings (currently just the selected test duration)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DURATIONS = (30, 60, 120, 300)
DEFAULT_DURATION = 60


def validate_duration(seconds: int) -> int:
    """Return *seconds* if it is a selectable duration, else raise ValueError."""
    if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds not in DURATIONS:
        raise ValueError(f"Unsupported test duration {seconds!r}; expected one of {DURATIONS}")
    return seconds


class SettingsStore:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or Path.home() / ".speedtype" / "settings.json"

    def get_duration(self) -> int:
        data = self._read_all()
        value = data.get("duration_seconds", DEFAULT_DURATION)
        try:
            return validate_duration(value)
        except ValueError:
            logger.warning("Ignoring unsupported duration %r in %s", value, self._path)
            return DEFAULT_DURATION

    def set_duration(self, seconds: int) -> None:
        data = self._read_all()
        data["duration_seconds"] = validate_duration(seconds)
        self._write_all(data)

    def _read_all(self) -> dict:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load settings from %s: %s", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self._path, e)
