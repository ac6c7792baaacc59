from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional, Protocol

from speedtype.core.attempts import Attempt, AttemptHistory
from speedtype.core.clock import ClockSource
from speedtype.core.comparison import Comparison, classify
from speedtype.core.scoring import accuracy_percent, words_per_minute
from speedtype.core.settings import DEFAULT_DURATION, validate_duration

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass(frozen=True)
class Session:
    """Snapshot of one timed test. Every transition produces a new value."""

    target_text: str = ""
    typed_text: str = ""
    duration_seconds: int = DEFAULT_DURATION
    remaining_seconds: int = DEFAULT_DURATION
    status: SessionStatus = SessionStatus.IDLE
    current_wpm: int = 0
    correct_count: int = 0

    @property
    def elapsed_seconds(self) -> int:
        return self.duration_seconds - self.remaining_seconds

    @property
    def characters_typed(self) -> int:
        return len(self.typed_text)

    @property
    def live_accuracy(self) -> Optional[float]:
        """Accuracy of the text typed so far, or None if nothing has been typed."""
        return accuracy_percent(self.correct_count, self.characters_typed)

    def comparison(self) -> Comparison:
        return classify(self.target_text, self.typed_text)


class PassageProvider(Protocol):
    def next(self) -> str: ...


class HistoryStore(Protocol):
    def load(self) -> AttemptHistory: ...

    def save(self, history: AttemptHistory) -> bool: ...


UpdateCallback = Callable[[Session], None]
StateCallback = Callable[[SessionStatus, SessionStatus], None]
AttemptCallback = Callable[[Attempt], None]


class TypingTest:
    """Drives a timed typing test: Idle -> Running -> Ended -> Running ...

    Transitions requested in the wrong state are ignored and return False,
    so a late clock tick or a keystroke after the test ended never raises.
    The attempt history is loaded once here and re-saved as a whole each
    time a test ends.
    """

    def __init__(
        self,
        passages: PassageProvider,
        clock: ClockSource,
        store: HistoryStore,
        duration_seconds: int = DEFAULT_DURATION,
        on_update: Optional[UpdateCallback] = None,
        on_state_change: Optional[StateCallback] = None,
        on_attempt: Optional[AttemptCallback] = None,
    ) -> None:
        duration = validate_duration(duration_seconds)
        self._passages = passages
        self._clock = clock
        self._store = store
        self._on_update = on_update
        self._on_state_change = on_state_change
        self._on_attempt = on_attempt
        self._duration = duration
        self._session = Session(duration_seconds=duration, remaining_seconds=duration)
        self._history: AttemptHistory = store.load()

    @property
    def session(self) -> Session:
        return self._session

    @property
    def status(self) -> SessionStatus:
        return self._session.status

    @property
    def history(self) -> AttemptHistory:
        return self._history

    @property
    def duration_seconds(self) -> int:
        """Duration the next test will run for."""
        return self._duration

    def set_duration(self, seconds: int) -> bool:
        """Select the duration for the next test. Ignored while a test is running."""
        duration = validate_duration(seconds)
        if self._session.status == SessionStatus.RUNNING:
            return False
        self._duration = duration
        if self._session.status == SessionStatus.IDLE:
            self._set_session(replace(self._session, duration_seconds=duration, remaining_seconds=duration))
        return True

    def start(self, duration_seconds: Optional[int] = None, passage: Optional[str] = None) -> bool:
        if self._session.status == SessionStatus.RUNNING:
            logger.debug("start() ignored: a test is already running")
            return False
        duration = validate_duration(duration_seconds) if duration_seconds is not None else self._duration
        self._duration = duration
        target = passage if passage is not None else self._passages.next()

        self._clock.cancel()
        previous = self._session.status
        self._session = Session(
            target_text=target,
            typed_text="",
            duration_seconds=duration,
            remaining_seconds=duration,
            status=SessionStatus.RUNNING,
            current_wpm=0,
            correct_count=0,
        )
        self._clock.on_tick(self.tick)
        logger.info("Typing test started (%ds)", duration)
        self._notify_state(previous, SessionStatus.RUNNING)
        self._notify_update()
        return True

    def tick(self) -> bool:
        if self._session.status != SessionStatus.RUNNING:
            logger.debug("tick() ignored in state %s", self._session.status.value)
            return False
        remaining = max(0, self._session.remaining_seconds - 1)
        if remaining == 0:
            # The countdown and the end of the test form one transition.
            self._session = replace(self._session, remaining_seconds=0)
            self.end()
            return True
        self._set_session(replace(self._session, remaining_seconds=remaining))
        return True

    def input_changed(self, text: str) -> bool:
        if self._session.status != SessionStatus.RUNNING:
            return False
        s = self._session
        comparison = classify(s.target_text, text)
        wpm = words_per_minute(text, s.elapsed_seconds)
        self._set_session(replace(s, typed_text=text, correct_count=comparison.correct_count, current_wpm=wpm))
        return True

    def end(self) -> bool:
        if self._session.status != SessionStatus.RUNNING:
            return False
        self._clock.cancel()
        self._session = replace(self._session, status=SessionStatus.ENDED)
        s = self._session

        accuracy = accuracy_percent(s.correct_count, s.characters_typed)
        attempt = Attempt(
            timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
            wpm=s.current_wpm,
            accuracy_percent=accuracy if accuracy is not None else 0.0,
            duration_seconds=s.duration_seconds,
        )
        self._history = self._history + (attempt,)
        if not self._store.save(self._history):
            logger.warning("Attempt kept in memory only; history could not be saved")
        logger.info(
            "Typing test ended: %d wpm, %.2f%% accuracy (%ds)",
            attempt.wpm,
            attempt.accuracy_percent,
            attempt.duration_seconds,
        )

        self._notify_state(SessionStatus.RUNNING, SessionStatus.ENDED)
        self._notify_update()
        if self._on_attempt:
            self._on_attempt(attempt)
        return True

    def clear_history(self) -> bool:
        """Forget all attempts and persist the empty history. Ignored while running."""
        if self._session.status == SessionStatus.RUNNING:
            return False
        self._history = ()
        self._store.save(self._history)
        logger.info("Attempt history cleared")
        return True

    def _set_session(self, session: Session) -> None:
        self._session = session
        self._notify_update()

    def _notify_update(self) -> None:
        if self._on_update:
            self._on_update(self._session)

    def _notify_state(self, old: SessionStatus, new: SessionStatus) -> None:
        if self._on_state_change:
            self._on_state_change(old, new)
