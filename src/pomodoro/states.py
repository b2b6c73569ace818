"""State table and transition function for the pomodoro cycle."""

from __future__ import annotations

from enum import Enum

from .constants import (
    BREAK_CYCLE,
    ICON_LONG_BREAK,
    ICON_PLANNED,
    ICON_POMODORO,
    ICON_SHORT_BREAK,
    LONG_BREAK_SECONDS,
    POMODORO_SECONDS,
    SHORT_BREAK_SECONDS,
    STATE_LONG_BREAK,
    STATE_PLANNED,
    STATE_POMODORO,
    STATE_SHORT_BREAK,
)


class TimerState(Enum):
    """Phases of a pomodoro timer. Values are human-readable labels."""
    PLANNED = STATE_PLANNED
    WORK = STATE_POMODORO
    SHORT_BREAK = STATE_SHORT_BREAK
    LONG_BREAK = STATE_LONG_BREAK

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


_DURATIONS: dict[TimerState, int] = {
    TimerState.PLANNED: POMODORO_SECONDS,
    TimerState.WORK: POMODORO_SECONDS,
    TimerState.SHORT_BREAK: SHORT_BREAK_SECONDS,
    TimerState.LONG_BREAK: LONG_BREAK_SECONDS,
}

_ICONS: dict[TimerState, str] = {
    TimerState.PLANNED: ICON_PLANNED,
    TimerState.WORK: ICON_POMODORO,
    TimerState.SHORT_BREAK: ICON_SHORT_BREAK,
    TimerState.LONG_BREAK: ICON_LONG_BREAK,
}


def duration_of(state: TimerState) -> int:
    """Return how long the given state lasts, in seconds."""
    return _DURATIONS[state]


def icon_of(state: TimerState) -> str:
    """Return the status-bar icon associated with the given state."""
    return _ICONS[state]


def advance(state: TimerState, break_counter: int) -> tuple[TimerState, int]:
    """Compute the state that follows ``state`` and the updated break counter.

    Leaving a work session picks a short break until the cycle is full, then
    a long break; the counter only moves when leaving ``WORK``.
    """
    if state is TimerState.WORK:
        if break_counter < BREAK_CYCLE - 1:
            next_state = TimerState.SHORT_BREAK
        else:
            next_state = TimerState.LONG_BREAK
        return next_state, (break_counter + 1) % BREAK_CYCLE

    return TimerState.WORK, break_counter
