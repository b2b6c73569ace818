from .constants import BREAK_CYCLE, DEFAULT_POLL_INTERVAL_SECONDS
from .formatting import format_remaining, minutes, render_status_line, seconds
from .service import (
    Clock,
    ClockError,
    PomodoroTimer,
    StateChangeCallback,
    TimerSnapshot,
)
from .states import TimerState, advance, duration_of, icon_of

__all__ = [
    "BREAK_CYCLE",
    "DEFAULT_POLL_INTERVAL_SECONDS",
    "Clock",
    "ClockError",
    "PomodoroTimer",
    "StateChangeCallback",
    "TimerSnapshot",
    "TimerState",
    "advance",
    "duration_of",
    "format_remaining",
    "icon_of",
    "minutes",
    "render_status_line",
    "seconds",
]
