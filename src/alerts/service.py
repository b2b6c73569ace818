"""State-change sink that notifies the desktop and plays the chime."""

import logging
from typing import Optional, Protocol

from pomodoro import TimerState

from .errors import AlertError


class NotifierLike(Protocol):
    def notify(self, body: str) -> None:
        ...


class ChimeLike(Protocol):
    def play(self) -> None:
        ...


def transition_message(state: TimerState) -> str:
    return f"next up: {state.label}"


class AlertService:
    """Best-effort alerts for timer transitions.

    Delivery failures are logged and dropped so they never reach the timer.
    """
    def __init__(
        self,
        notifier: Optional[NotifierLike] = None,
        chime: Optional[ChimeLike] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._notifier = notifier
        self._chime = chime
        self._logger = logger or logging.getLogger(__name__)

    def on_transition(self, new_state: TimerState) -> None:
        if self._notifier is not None:
            try:
                self._notifier.notify(transition_message(new_state))
            except AlertError as error:
                self._logger.warning("Desktop notification failed: %s", error)

        if self._chime is not None:
            try:
                self._chime.play()
            except AlertError as error:
                self._logger.warning("Chime playback failed: %s", error)
