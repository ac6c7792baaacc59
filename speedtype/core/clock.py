from __future__ import annotations

from typing import Callable, Protocol

TickCallback = Callable[[], None]


class ClockSource(Protocol):
    """Periodic 1 Hz tick source.

    After ``cancel()`` returns no further callbacks may be delivered.
    Calling ``on_tick`` again replaces the previous callback.
    """

    def on_tick(self, callback: TickCallback) -> None: ...

    def cancel(self) -> None: ...
