"""QTimer-backed clock for the typing test countdown."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QTimer

from speedtype.core.clock import TickCallback


class QtClockSource:
    """Fires the registered callback once per second until cancelled."""

    def __init__(self, parent: Optional[QObject] = None, interval_ms: int = 1000) -> None:
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)
        self._callback: Optional[TickCallback] = None

    def on_tick(self, callback: TickCallback) -> None:
        self._timer.stop()
        self._callback = callback
        self._timer.start()

    def cancel(self) -> None:
        self._timer.stop()
        self._callback = None

    def _fire(self) -> None:
        # A timeout already queued before cancel() must not reach the callback.
        callback = self._callback
        if callback is not None:
            callback()
