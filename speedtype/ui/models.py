"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from speedtype.core.attempts import Attempt, AttemptHistory


@dataclass
class HistoryRow:
    """One line of the attempt history list, with the WPM change since the attempt before it."""

    attempt: Attempt
    number: int
    wpm_delta: Optional[int] = None

    @property
    def label(self) -> str:
        when = _format_timestamp(self.attempt.timestamp)
        text = (
            f"#{self.number}  {when}  {self.attempt.wpm} WPM  "
            f"{self.attempt.accuracy_percent:.2f}%  ({self.attempt.duration_seconds}s)"
        )
        if self.wpm_delta is not None:
            text += f"  {self.wpm_delta:+d}"
        return text


def build_history_rows(history: AttemptHistory) -> List[HistoryRow]:
    """Rows for *history*, newest first."""
    rows: List[HistoryRow] = []
    previous: Optional[Attempt] = None
    for number, attempt in enumerate(history, start=1):
        delta = attempt.wpm - previous.wpm if previous is not None else None
        rows.append(HistoryRow(attempt=attempt, number=number, wpm_delta=delta))
        previous = attempt
    rows.reverse()
    return rows


def _format_timestamp(timestamp: str) -> str:
    try:
        return datetime.fromisoformat(timestamp).astimezone().strftime("%Y-%m-%d %H:%M")
    except ValueError:
        return timestamp
