"""Typing test UI: passage display and countdown label."""

from __future__ import annotations

import html
from itertools import groupby
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QWidget

from speedtype.core.comparison import CharState, Comparison
from speedtype.ui.colors import HomeColors, countdown_color

_STATE_STYLES = {
    CharState.CORRECT: f"color:{HomeColors.CHAR_CORRECT};",
    CharState.INCORRECT: (
        f"color:{HomeColors.CHAR_INCORRECT}; background:{HomeColors.CHAR_INCORRECT_BG};"
        " text-decoration: underline;"
    ),
    CharState.UNTYPED: f"color:{HomeColors.CHAR_UNTYPED};",
}


def passage_html(target: str, comparison: Comparison) -> str:
    """Rich text for *target* with one span per run of equally classified characters."""
    parts = []
    index = 0
    for state, run in groupby(comparison.states):
        length = len(list(run))
        chunk = html.escape(target[index:index + length])
        parts.append(f'<span style="{_STATE_STYLES[state]}">{chunk}</span>')
        index += length
    return "".join(parts)


class PassageLabel(QLabel):
    """Word-wrapped passage with correct / incorrect / untyped colouring."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWordWrap(True)
        self.setTextFormat(Qt.RichText)
        self.setMinimumHeight(90)
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {HomeColors.CARD_BG};
                border: 1px solid {HomeColors.CARD_BORDER};
                border-radius: 12px;
                padding: 16px;
                font-size: 22px;
            }}
            """
        )

    def show_comparison(self, target: str, comparison: Comparison) -> None:
        self.setText(passage_html(target, comparison))


class CountdownLabel(QLabel):
    """TIME LEFT readout whose colour warms up as the countdown runs out."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)

    def set_remaining(self, remaining_seconds: int, duration_seconds: int) -> None:
        color = countdown_color(remaining_seconds, duration_seconds)
        self.setText(f"TIME LEFT: {remaining_seconds} SECONDS")
        self.setStyleSheet(f"QLabel {{ color: {color}; font-size: 20px; font-weight: 700; }}")
