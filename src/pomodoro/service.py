"""In-memory pomodoro state machine driven by polling a monotonic clock."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .states import TimerState, advance, duration_of

Clock = Callable[[], float]
StateChangeCallback = Callable[[TimerState], None]


class ClockError(RuntimeError):
    """Raised when the clock source moves backwards."""


@dataclass(frozen=True)
class TimerSnapshot:
    """Immutable timer snapshot exposed to renderers and notification sinks."""
    state: TimerState
    running: bool
    remaining_seconds: float
    break_counter: int


class PomodoroTimer:
    """Work/break cycle timer.

    The timer never reads the clock on its own; the driver calls ``poll()`` at
    a steady cadence and each call deducts the time elapsed since the
    previous one. Only a single thread of control may use an instance.
    """

    def __init__(
        self,
        *,
        clock: Optional[Clock] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._clock: Clock = clock or time.monotonic
        self._logger = logger or logging.getLogger("pomodoro")

        self._running = False
        self._state = TimerState.PLANNED
        self._started_at: Optional[float] = None
        self._remaining_seconds: float = float(duration_of(self._state))
        self._last_poll_at: float = self._clock()
        self._break_counter = 0
        self._on_state_change: Optional[StateChangeCallback] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def started_at(self) -> Optional[float]:
        return self._started_at

    @property
    def remaining_seconds(self) -> float:
        return self._remaining_seconds

    @property
    def last_poll_at(self) -> float:
        return self._last_poll_at

    @property
    def break_counter(self) -> int:
        return self._break_counter

    @property
    def on_state_change(self) -> Optional[StateChangeCallback]:
        return self._on_state_change

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            state=self._state,
            running=self._running,
            remaining_seconds=self._remaining_seconds,
            break_counter=self._break_counter,
        )

    def set_on_state_change(self, callback: Optional[StateChangeCallback]) -> None:
        """Set the callback invoked with the new state after each expiry."""
        self._on_state_change = callback

    def start(self) -> None:
        if self._running:
            return

        if self._started_at is None:
            # the first start leaves PLANNED without notifying anyone
            self._started_at = self._clock()
            self._next_state()
        self._running = True
        self._logger.debug(
            "Timer started: state=%s remaining=%.2fs",
            self._state,
            self._remaining_seconds,
        )

    def stop(self) -> None:
        if self._running:
            self._logger.debug(
                "Timer stopped: state=%s remaining=%.2fs",
                self._state,
                self._remaining_seconds,
            )
        self._running = False

    def toggle(self) -> None:
        if not self._running:
            self.start()
        else:
            self.stop()

    def poll(self) -> None:
        """Account for elapsed time and move on to the next state on expiry.

        An expired state is replaced on the poll that observes the expiry and
        no time is deducted on that call; the new state starts counting down
        from the next poll. A long gap between polls is deducted in a single
        step and skipped transitions are not replayed.
        """
        now = self._clock()
        if now < self._last_poll_at:
            raise ClockError(
                f"Clock moved backwards: {now!r} < {self._last_poll_at!r}"
            )

        if self._running:
            if self._remaining_seconds <= 0:
                self._next_state()
                self._logger.info(
                    "Time is up, next up: %s (break_counter=%d)",
                    self._state,
                    self._break_counter,
                )
                if self._on_state_change is not None:
                    self._on_state_change(self._state)
            else:
                self._remaining_seconds -= now - self._last_poll_at
        self._last_poll_at = now

    def reset(self) -> "PomodoroTimer":
        """Return a brand-new timer sharing this timer's clock and logger.

        Counters and the state-change callback are not carried over.
        """
        self._logger.info("Timer reset from state=%s", self._state)
        return PomodoroTimer(clock=self._clock, logger=self._logger)

    def _next_state(self) -> None:
        self._state, self._break_counter = advance(self._state, self._break_counter)
        self._remaining_seconds = float(duration_of(self._state))
