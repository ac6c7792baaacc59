"""WPM and accuracy formulas.

Both functions are total: degenerate input maps to ``0`` or ``None``
instead of raising.
"""

from __future__ import annotations

from typing import Optional


def word_count(text: str) -> int:
    """Number of whitespace-separated words in *text*."""
    return len(text.split())


def words_per_minute(typed: str, elapsed_seconds: float) -> int:
    """Words typed divided by minutes elapsed, rounded to the nearest integer."""
    if elapsed_seconds <= 0:
        return 0
    return round(word_count(typed) / (elapsed_seconds / 60.0))


def accuracy_percent(correct_count: int, total_typed: int) -> Optional[float]:
    """Correct characters as a percentage of typed characters (2 decimals).

    Returns None when nothing was typed.
    """
    if total_typed <= 0:
        return None
    return round(100.0 * correct_count / total_typed, 2)
