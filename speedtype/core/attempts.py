from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attempt:
    """One finished timed test."""

    timestamp: str
    wpm: int
    accuracy_percent: float
    duration_seconds: int


AttemptHistory = Tuple[Attempt, ...]


def best_wpm(history: AttemptHistory) -> int:
    return max((a.wpm for a in history), default=0)


def best_accuracy(history: AttemptHistory) -> float:
    return max((a.accuracy_percent for a in history), default=0.0)


def average_wpm(history: AttemptHistory) -> float:
    if not history:
        return 0.0
    return sum(a.wpm for a in history) / len(history)


class AttemptStore:
    """Stores the attempt history as a whole. Persists to disk across app restarts.
    File: ~/.speedtype/attempts.json. Every save overwrites the previous contents."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._file_path = path or Path.home() / ".speedtype" / "attempts.json"

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> AttemptHistory:
        """Return the saved history, or an empty one if the file is missing or unreadable."""
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return ()
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load attempts from %s: %s", self._file_path, e)
            return ()
        if not isinstance(payload, dict) or not isinstance(payload.get("attempts"), list):
            logger.warning("Ignoring malformed attempt history in %s", self._file_path)
            return ()

        attempts = []
        for value in payload["attempts"]:
            attempt = _attempt_from_dict(value)
            if attempt is None:
                logger.warning("Skipping malformed attempt entry: %r", value)
                continue
            attempts.append(attempt)
        return tuple(attempts)

    def save(self, history: AttemptHistory) -> bool:
        """Persist *history*, replacing what was on disk. Returns False if the write failed."""
        payload = {"attempts": [asdict(a) for a in history]}
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save attempts to %s: %s", self._file_path, e)
            return False
        return True


def _attempt_from_dict(value: object) -> Optional[Attempt]:
    if not isinstance(value, dict):
        return None
    timestamp = value.get("timestamp")
    wpm = value.get("wpm")
    accuracy = value.get("accuracy_percent")
    duration = value.get("duration_seconds")
    if not isinstance(timestamp, str) or not _is_int(wpm) or not _is_int(duration):
        return None
    if isinstance(accuracy, bool) or not isinstance(accuracy, (int, float)) or not math.isfinite(accuracy):
        return None
    if wpm < 0 or duration <= 0 or not 0.0 <= accuracy <= 100.0:
        return None
    return Attempt(
        timestamp=timestamp,
        wpm=wpm,
        accuracy_percent=float(accuracy),
        duration_seconds=duration,
    )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
