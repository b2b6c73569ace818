from __future__ import annotations

import sys
from typing import Optional, TextIO

from pomodoro import TimerSnapshot, render_status_line


class StatusLineWriter:
    """Writes one flushed status line per poll cycle for the status bar."""
    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdout

    def write(self, snapshot: TimerSnapshot) -> str:
        line = render_status_line(snapshot)
        self._stream.write(line + "\n")
        self._stream.flush()
        return line
