"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_CONFIG_FILE = "config.toml"
DEFAULT_CONFIG_DIR_NAME = "pomod"
CONFIG_FILE_ENV = "POMOD_CONFIG_FILE"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class RuntimeSettings:
    """Control-loop cadence and log verbosity from `[runtime]`."""
    poll_interval_seconds: float = 0.25
    log_level: str = "WARNING"


@dataclass(frozen=True)
class ControlSettings:
    """Signal names mapped to control events from `[control]`."""
    toggle_signal: str = "SIGUSR1"
    reset_signal: str = "SIGUSR2"


@dataclass(frozen=True)
class NotificationSettings:
    """Desktop notification settings from `[notifications]`."""
    enabled: bool = True
    app_name: str = "pomod"
    summary: str = "pomod: time's up"
    urgency: str = "critical"
    timeout_ms: int = 5000


@dataclass(frozen=True)
class SoundSettings:
    """Chime playback settings from `[sound]`."""
    enabled: bool = True
    file: str = ""
    output_device: Optional[int] = None
    volume: float = 0.6


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    runtime: RuntimeSettings = field(default_factory=RuntimeSettings)
    control: ControlSettings = field(default_factory=ControlSettings)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    sound: SoundSettings = field(default_factory=SoundSettings)
    source_file: Optional[str] = None
