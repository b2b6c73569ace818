"""Helpers that turn remaining time into status-bar text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .states import icon_of

if TYPE_CHECKING:
    from .service import TimerSnapshot


def minutes(duration_seconds: float) -> int:
    """Whole minutes in the duration."""
    return int(duration_seconds) // 60


def seconds(duration_seconds: float) -> int:
    """Seconds left over in the current minute."""
    return int(duration_seconds) % 60


def format_remaining(duration_seconds: float) -> str:
    whole = max(0, int(duration_seconds))
    return f"{minutes(whole):02d}:{seconds(whole):02d}"


def render_status_line(snapshot: "TimerSnapshot") -> str:
    return f"{icon_of(snapshot.state)} {format_remaining(snapshot.remaining_seconds)}"
