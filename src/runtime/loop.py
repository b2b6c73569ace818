"""Runtime control loop: waits for control events, polls the timer, renders."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from pomodoro import (
    DEFAULT_POLL_INTERVAL_SECONDS,
    Clock,
    ClockError,
    PomodoroTimer,
    StateChangeCallback,
    TimerSnapshot,
)

from .controls import (
    CONTROL_QUIT,
    CONTROL_RESET,
    CONTROL_TOGGLE,
    ControlChannel,
    ControlEvent,
)


class StatusOutputLike(Protocol):
    def write(self, snapshot: TimerSnapshot) -> str:
        ...


def _no_op() -> None:
    return None


@dataclass(frozen=True)
class RuntimeHooks:
    """Injectable lifecycle hooks used by the runtime shutdown flow."""
    on_shutdown: Callable[[], None] = _no_op


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle required to construct the runtime engine."""
    logger: logging.Logger
    channel: ControlChannel
    output: StatusOutputLike
    on_state_change: Optional[StateChangeCallback] = None
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS
    clock: Optional[Clock] = None
    hooks: RuntimeHooks = field(default_factory=RuntimeHooks)


class RuntimeEngine:
    """Single-threaded loop that owns the timer.

    Each iteration services at most one control event, polls the timer once
    and renders one status line.
    """
    def __init__(self, bootstrap: RuntimeBootstrap):
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger
        self._timer = PomodoroTimer(
            clock=bootstrap.clock,
            logger=logging.getLogger("pomodoro"),
        )
        self._attach_state_change()

    @property
    def timer(self) -> PomodoroTimer:
        return self._timer

    def run(self) -> int:
        try:
            self._logger.info(
                "Timer ready, polling every %.3fs",
                self._bootstrap.poll_interval_seconds,
            )
            while True:
                loop_exit = self.step()
                if loop_exit is not None:
                    return loop_exit

        except KeyboardInterrupt:
            self._logger.info("Shutdown requested by keyboard interrupt.")
            return 0
        except BrokenPipeError:
            self._logger.info("Status output closed, shutting down.")
            return 0
        except ClockError as error:
            self._logger.error("Monotonic clock failure: %s", error)
            return 1
        except Exception as error:
            self._logger.error("Unexpected error: %s", error, exc_info=True)
            return 1
        finally:
            self._shutdown()

    def step(self) -> Optional[int]:
        """Run one loop iteration; returns an exit code when the loop should end."""
        event = self._bootstrap.channel.wait(self._bootstrap.poll_interval_seconds)
        if event is not None:
            event_exit = self._handle_event(event)
            if event_exit is not None:
                return event_exit

        self._timer.poll()
        self._bootstrap.output.write(self._timer.snapshot())
        return None

    def _handle_event(self, event: ControlEvent) -> Optional[int]:
        if event == CONTROL_TOGGLE:
            self._timer.toggle()
            self._logger.info(
                "Timer %s (%s)",
                "started" if self._timer.running else "stopped",
                self._timer.state,
            )
            return None

        if event == CONTROL_RESET:
            self._timer = self._timer.reset()
            self._attach_state_change()
            return None

        if event == CONTROL_QUIT:
            self._logger.info("Shutdown requested.")
            return 0

        self._logger.warning("Ignoring unknown control event: %s", event)
        return None

    def _attach_state_change(self) -> None:
        self._timer.set_on_state_change(self._bootstrap.on_state_change)

    def _shutdown(self) -> None:
        self._logger.debug("Stopping runtime loop...")
        try:
            self._bootstrap.hooks.on_shutdown()
        except Exception as error:
            self._logger.error("Error during shutdown: %s", error, exc_info=True)
