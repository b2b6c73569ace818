"""Runtime engine exports."""

from .controls import (
    CONTROL_QUIT,
    CONTROL_RESET,
    CONTROL_TOGGLE,
    ControlChannel,
    ControlConfigurationError,
    ControlEvent,
    InstalledSignals,
    QueueControlChannel,
    install_signal_handlers,
    resolve_signal,
    restore_signal_handlers,
)
from .loop import RuntimeBootstrap, RuntimeEngine, RuntimeHooks
from .output import StatusLineWriter

__all__ = [
    "CONTROL_QUIT",
    "CONTROL_RESET",
    "CONTROL_TOGGLE",
    "ControlChannel",
    "ControlConfigurationError",
    "ControlEvent",
    "InstalledSignals",
    "QueueControlChannel",
    "RuntimeBootstrap",
    "RuntimeEngine",
    "RuntimeHooks",
    "StatusLineWriter",
    "install_signal_handlers",
    "resolve_signal",
    "restore_signal_handlers",
]
