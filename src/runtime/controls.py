"""Control events and the OS signal wiring that feeds them to the loop."""

from __future__ import annotations

import logging
import signal
from dataclasses import dataclass
from queue import Empty, SimpleQueue
from typing import Any, Literal, Optional, Protocol

ControlEvent = Literal["toggle", "reset", "quit"]

CONTROL_TOGGLE: ControlEvent = "toggle"
CONTROL_RESET: ControlEvent = "reset"
CONTROL_QUIT: ControlEvent = "quit"

_QUIT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class ControlConfigurationError(Exception):
    """Raised when control signals cannot be resolved or installed."""


class ControlChannel(Protocol):
    """Source of control events polled by the runtime loop."""
    def wait(self, timeout: float) -> Optional[ControlEvent]:
        ...


class QueueControlChannel:
    """Control channel backed by a SimpleQueue.

    ``publish`` is safe to call from a signal handler.
    """

    def __init__(self, queue: Optional[SimpleQueue] = None):
        self._queue: SimpleQueue = queue if queue is not None else SimpleQueue()

    def publish(self, event: ControlEvent) -> None:
        self._queue.put(event)

    def wait(self, timeout: float) -> Optional[ControlEvent]:
        try:
            return self._queue.get(timeout=timeout)
        except Empty:
            return None


def resolve_signal(name: str) -> signal.Signals:
    normalized = name.strip().upper()
    if not normalized.startswith("SIG"):
        normalized = f"SIG{normalized}"
    try:
        return signal.Signals[normalized]
    except KeyError as error:
        raise ControlConfigurationError(f"Unknown signal: {name}") from error


@dataclass(frozen=True)
class InstalledSignals:
    """Signals routed into a control channel and the handlers they replaced."""
    events: dict[signal.Signals, ControlEvent]
    previous_handlers: dict[signal.Signals, Any]


def install_signal_handlers(
    channel: QueueControlChannel,
    *,
    toggle_signal: str = "SIGUSR1",
    reset_signal: str = "SIGUSR2",
    logger: Optional[logging.Logger] = None,
) -> InstalledSignals:
    """Route process signals into ``channel`` as control events.

    The toggle and reset signals are configurable; SIGINT and SIGTERM always
    request a graceful shutdown. The returned record is what
    ``restore_signal_handlers`` needs to put the previous handlers back.
    """
    log = logger or logging.getLogger("runtime.controls")
    mapping: dict[signal.Signals, ControlEvent] = {
        resolve_signal(toggle_signal): CONTROL_TOGGLE,
        resolve_signal(reset_signal): CONTROL_RESET,
    }
    for quit_signal in _QUIT_SIGNALS:
        if quit_signal in mapping:
            raise ControlConfigurationError(
                f"{quit_signal.name} is reserved for shutdown"
            )
        mapping[quit_signal] = CONTROL_QUIT

    def signal_handler(signum: int, frame) -> None:
        channel.publish(mapping[signal.Signals(signum)])

    previous: dict[signal.Signals, Any] = {}
    for signum in mapping:
        try:
            previous[signum] = signal.signal(signum, signal_handler)
        except (OSError, ValueError) as error:
            restore_signal_handlers(
                InstalledSignals(events={}, previous_handlers=previous)
            )
            raise ControlConfigurationError(
                f"Failed to install handler for {signum.name}: {error}"
            ) from error

    log.debug(
        "Signal handlers installed: %s",
        ", ".join(f"{signum.name}={event}" for signum, event in mapping.items()),
    )
    return InstalledSignals(events=mapping, previous_handlers=previous)


def restore_signal_handlers(installed: InstalledSignals) -> None:
    for signum, handler in installed.previous_handlers.items():
        # Handlers set outside Python come back as None.
        signal.signal(signum, signal.SIG_DFL if handler is None else handler)
