"""Durations, icons, and cycle constants used by the pomodoro state machine."""

from __future__ import annotations

# times are in seconds
POMODORO_SECONDS = 25 * 60
SHORT_BREAK_SECONDS = 5 * 60
LONG_BREAK_SECONDS = 30 * 60

# number of work sessions before a long break replaces the short one
BREAK_CYCLE = 4

# Nerd Font / Pomicons glyphs
ICON_PLANNED = "\ue002"
ICON_POMODORO = "\ue003"
ICON_SHORT_BREAK = "\ue005"
ICON_LONG_BREAK = "\ue006"

STATE_PLANNED = "planned"
STATE_POMODORO = "pomodoro"
STATE_SHORT_BREAK = "short break"
STATE_LONG_BREAK = "long break"

DEFAULT_POLL_INTERVAL_SECONDS = 0.25
