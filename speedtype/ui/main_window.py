from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from speedtype.core.attempts import Attempt, AttemptStore, average_wpm, best_accuracy, best_wpm
from speedtype.core.passages import PassageRepository
from speedtype.core.session import Session, SessionStatus, TypingTest
from speedtype.core.settings import DURATIONS, SettingsStore
from speedtype.ui.colors import HomeColors
from speedtype.ui.models import build_history_rows
from speedtype.ui.timer import QtClockSource
from speedtype.ui.typing_widgets import CountdownLabel, PassageLabel


class MainWindow(QMainWindow):
    """Single-screen typing test: controls, passage, input box, results and history."""

    def __init__(
        self,
        passages: PassageRepository,
        attempt_store: AttemptStore,
        settings: SettingsStore,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Speedtype")
        self._settings = settings
        self._clock = QtClockSource(self)
        self._test = TypingTest(
            passages=passages,
            clock=self._clock,
            store=attempt_store,
            duration_seconds=settings.get_duration(),
            on_update=self._on_session_update,
            on_state_change=self._on_state_change,
            on_attempt=self._on_attempt,
        )

        self._title_label: Optional[QLabel] = None
        self._duration_combo: Optional[QComboBox] = None
        self._start_button: Optional[QPushButton] = None
        self._countdown_label: Optional[CountdownLabel] = None
        self._passage_label: Optional[PassageLabel] = None
        self.input_box: Optional[QPlainTextEdit] = None
        self._results_label: Optional[QLabel] = None
        self._summary_label: Optional[QLabel] = None
        self._history_list: Optional[QListWidget] = None
        self._clear_button: Optional[QPushButton] = None

        self._build_ui()
        self._on_session_update(self._test.session)
        self._apply_status(self._test.status)
        self._refresh_history()

    def _build_ui(self) -> None:
        central = QWidget(self)
        central.setStyleSheet(
            f"background: qlineargradient(x1:0, y1:0, x2:0, y2:1,"
            f" stop:0 {HomeColors.BG_TOP}, stop:1 {HomeColors.BG_BOTTOM});"
            f" color: {HomeColors.TEXT_PRIMARY};"
        )
        layout = QVBoxLayout(central)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(14)

        self._title_label = QLabel()
        self._title_label.setAlignment(Qt.AlignCenter)
        self._title_label.setStyleSheet(f"font-size: 28px; font-weight: 900; color: {HomeColors.PRIMARY_DARK};")
        layout.addWidget(self._title_label)

        controls = QHBoxLayout()
        self._duration_combo = QComboBox()
        for seconds in DURATIONS:
            self._duration_combo.addItem(f"{seconds} seconds", seconds)
        self._duration_combo.setCurrentIndex(DURATIONS.index(self._test.duration_seconds))
        self._duration_combo.currentIndexChanged.connect(self._on_duration_selected)
        controls.addWidget(self._duration_combo)

        self._start_button = QPushButton()
        self._start_button.setCursor(Qt.PointingHandCursor)
        self._start_button.setStyleSheet(
            f"""
            QPushButton {{
                background: {HomeColors.PRIMARY}; color: white;
                border-radius: 8px; padding: 8px 18px; font-weight: 700;
            }}
            QPushButton:disabled {{ background: {HomeColors.PRIMARY_LIGHT}; }}
            """
        )
        self._start_button.clicked.connect(self._start_test)
        controls.addWidget(self._start_button, 1)
        layout.addLayout(controls)

        self._countdown_label = CountdownLabel()
        layout.addWidget(self._countdown_label)

        self._passage_label = PassageLabel()
        layout.addWidget(self._passage_label)

        self.input_box = QPlainTextEdit()
        self.input_box.setMinimumHeight(110)
        self.input_box.textChanged.connect(self._on_text_changed)
        layout.addWidget(self.input_box)

        self._results_label = QLabel()
        self._results_label.setStyleSheet(f"font-size: 16px; color: {HomeColors.TEXT_SECONDARY};")
        layout.addWidget(self._results_label)

        divider = QFrame()
        divider.setFrameShape(QFrame.HLine)
        layout.addWidget(divider)

        history_header = QHBoxLayout()
        self._summary_label = QLabel()
        self._summary_label.setStyleSheet(f"color: {HomeColors.TEXT_MUTED};")
        history_header.addWidget(self._summary_label, 1)
        self._clear_button = QPushButton("Clear history")
        self._clear_button.clicked.connect(self._clear_history)
        history_header.addWidget(self._clear_button)
        layout.addLayout(history_header)

        self._history_list = QListWidget()
        layout.addWidget(self._history_list, 1)

        self.setCentralWidget(central)
        self.resize(820, 720)

    def _start_test(self) -> None:
        if not self._test.start():
            return
        if self.input_box is not None:
            self.input_box.setFocus()

    def _on_text_changed(self) -> None:
        if self.input_box is None:
            return
        self._test.input_changed(self.input_box.toPlainText())

    def _on_duration_selected(self, index: int) -> None:
        if self._duration_combo is None:
            return
        seconds = int(self._duration_combo.itemData(index))
        if self._test.set_duration(seconds):
            self._settings.set_duration(seconds)
            self._on_session_update(self._test.session)

    def _clear_history(self) -> None:
        if self._test.clear_history():
            self._refresh_history()

    def _on_session_update(self, session: Session) -> None:
        """Redraw countdown, passage colouring and the result/live stats line."""
        if self._title_label is not None:
            self._title_label.setText(f"{self._test.duration_seconds}-SECOND TYPING TEST")
        if self._countdown_label is not None:
            self._countdown_label.set_remaining(session.remaining_seconds, session.duration_seconds)
        if self._passage_label is not None:
            self._passage_label.show_comparison(session.target_text, session.comparison())
        if self._results_label is None:
            return
        accuracy = session.live_accuracy
        accuracy_text = f"{accuracy:.2f}%" if accuracy is not None else "–"
        if session.status == SessionStatus.RUNNING:
            self._results_label.setText(f"WPM: {session.current_wpm}    ACCURACY: {accuracy_text}")
        elif session.status == SessionStatus.ENDED and session.characters_typed > 0:
            self._results_label.setText(
                f"CHARACTERS TYPED: {session.characters_typed}    "
                f"CORRECT CHARACTERS: {session.correct_count}    "
                f"ACCURACY: {accuracy_text}    WPM: {session.current_wpm}"
            )
        else:
            self._results_label.setText("")

    def _on_state_change(self, old: SessionStatus, new: SessionStatus) -> None:
        if new == SessionStatus.RUNNING and self.input_box is not None:
            # Clearing the box fires textChanged; the new session already has empty input.
            self.input_box.blockSignals(True)
            self.input_box.setPlainText("")
            self.input_box.blockSignals(False)
        self._apply_status(new)

    def _apply_status(self, status: SessionStatus) -> None:
        running = status == SessionStatus.RUNNING
        if self._start_button is not None:
            self._start_button.setEnabled(not running)
            self._start_button.setText("TEST IN PROGRESS" if running else "START TEST")
        if self._duration_combo is not None:
            self._duration_combo.setEnabled(not running)
        if self._clear_button is not None:
            self._clear_button.setEnabled(not running)
        if self.input_box is not None:
            self.input_box.setReadOnly(not running)
            self.input_box.setPlaceholderText("TYPE HERE" if running else "CLICK 'START TEST' TO BEGIN")

    def _on_attempt(self, attempt: Attempt) -> None:
        self._refresh_history()

    def _refresh_history(self) -> None:
        history = self._test.history
        if self._summary_label is not None:
            if history:
                self._summary_label.setText(
                    f"{len(history)} attempts · best {best_wpm(history)} WPM · "
                    f"average {average_wpm(history):.0f} WPM · best accuracy {best_accuracy(history):.2f}%"
                )
            else:
                self._summary_label.setText("No attempts yet")
        if self._history_list is not None:
            self._history_list.clear()
            for row in build_history_rows(history):
                self._history_list.addItem(row.label)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop the countdown so no tick lands after the window is gone."""
        self._clock.cancel()
        super().closeEvent(event)
