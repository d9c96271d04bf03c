"""Start/pause/reset stopwatch used to time a workout.

Time is read from a monotonic clock so wall-clock adjustments never make a
session longer or shorter.  While running, an optional ``on_tick`` callback
is invoked once per :data:`backend.TIMER_REFRESH_INTERVAL` through Kivy's
:class:`~kivy.clock.Clock` so the screen can redraw the elapsed time.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable

from kivy.clock import Clock

from backend import MS_PER_MINUTE, TIMER_REFRESH_INTERVAL


@dataclass(frozen=True)
class TimerState:
    is_running: bool
    start_ms: float | None
    accumulated_ms: float


def round_minutes(ms: float) -> int:
    """Convert ``ms`` to whole minutes, rounding halves up."""

    return max(int(math.floor(ms / MS_PER_MINUTE + 0.5)), 0)


def format_elapsed(ms: float) -> str:
    """Return ``ms`` as ``MM:SS``, or ``H:MM:SS`` from one hour on."""

    total = max(int(ms // 1000), 0)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


class ElapsedTimer:
    """Stopwatch whose value is read once when a session is saved.

    Parameters
    ----------
    on_tick:
        Called with the elapsed milliseconds on every refresh while running.
    clock:
        Returns the current time in seconds. Defaults to
        :func:`time.monotonic`.
    scheduler:
        Object providing ``schedule_interval(callback, interval)`` that
        returns an event with ``cancel()``. Defaults to Kivy's ``Clock``.
    """

    def __init__(
        self,
        on_tick: Callable[[float], None] | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        scheduler=None,
        interval: float = TIMER_REFRESH_INTERVAL,
    ) -> None:
        self.on_tick = on_tick
        self._clock = clock
        self._scheduler = scheduler if scheduler is not None else Clock
        self.interval = interval
        self._running = False
        self._start_ms: float | None = None
        self._accumulated_ms: float = 0.0
        self._event = None

    def _now_ms(self) -> float:
        return self._clock() * 1000

    @property
    def is_running(self) -> bool:
        return self._running

    def state(self) -> TimerState:
        return TimerState(self._running, self._start_ms, self._accumulated_ms)

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Start or resume counting from the accumulated value."""

        if self._running:
            return
        self._start_ms = self._now_ms() - self._accumulated_ms
        self._running = True
        self._cancel_refresh()
        self.ensure_refresh()

    def pause(self) -> None:
        """Freeze the elapsed time until :meth:`start` is called again."""

        if not self._running:
            return
        self._accumulated_ms = self._now_ms() - self._start_ms
        self._running = False
        self._cancel_refresh()

    def reset(self) -> None:
        """Stop and zero the stopwatch."""

        self._cancel_refresh()
        self._running = False
        self._start_ms = None
        self._accumulated_ms = 0.0

    def dispose(self) -> None:
        """Stop display refreshes, e.g. when the owning screen is left."""

        self._cancel_refresh()

    def ensure_refresh(self) -> None:
        """Reschedule display refreshes for a running timer after :meth:`dispose`."""

        if self._running and self._event is None:
            self._event = self._scheduler.schedule_interval(self._tick, self.interval)

    def _cancel_refresh(self) -> None:
        if self._event is not None:
            self._event.cancel()
            self._event = None

    # ------------------------------------------------------------------
    # Readings
    # ------------------------------------------------------------------
    def elapsed_ms(self) -> float:
        if self._running:
            return max(self._now_ms() - self._start_ms, 0.0)
        return self._accumulated_ms

    def read_minutes(self) -> int:
        """Return the elapsed time in whole minutes without changing state."""

        return round_minutes(self.elapsed_ms())

    def _tick(self, _dt) -> None:
        if self.on_tick is not None:
            self.on_tick(self.elapsed_ms())
