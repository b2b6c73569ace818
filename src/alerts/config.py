"""Configuration model for desktop notifications and the transition chime."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_URGENCIES = ("low", "normal", "critical")


class AlertConfigurationError(Exception):
    """Raised when alert configuration is invalid."""


@dataclass(frozen=True)
class NotificationConfig:
    """Validated desktop notification settings."""
    enabled: bool = True
    app_name: str = "pomod"
    summary: str = "pomod: time's up"
    urgency: str = "critical"
    timeout_ms: int = 5000

    def __post_init__(self) -> None:
        if not self.app_name.strip():
            raise AlertConfigurationError("notifications.app_name cannot be empty")
        if self.urgency not in _URGENCIES:
            allowed = ", ".join(_URGENCIES)
            raise AlertConfigurationError(
                f"notifications.urgency must be one of: {allowed}"
            )
        if self.timeout_ms < 0:
            raise AlertConfigurationError(
                f"notifications.timeout_ms must be >= 0, got: {self.timeout_ms}"
            )

    @classmethod
    def from_settings(cls, settings) -> "NotificationConfig":
        return cls(
            enabled=bool(settings.enabled),
            app_name=(settings.app_name or "pomod").strip(),
            summary=settings.summary,
            urgency=(settings.urgency or "critical").strip().lower(),
            timeout_ms=settings.timeout_ms,
        )


@dataclass(frozen=True)
class SoundConfig:
    """Validated chime playback settings."""
    enabled: bool = True
    file: str = ""
    output_device_index: Optional[int] = None
    volume: float = 0.6

    def __post_init__(self) -> None:
        if not 0.0 <= self.volume <= 1.0:
            raise AlertConfigurationError(
                f"sound.volume must be in [0.0, 1.0], got: {self.volume}"
            )
        if self.enabled and self.file:
            sound_path = Path(self.file)
            if not sound_path.is_file():
                raise AlertConfigurationError(f"Sound file not found: {sound_path}")
            if sound_path.suffix.lower() != ".wav":
                raise AlertConfigurationError(
                    f"Sound file must be a .wav file: {sound_path}"
                )

    @classmethod
    def from_settings(cls, settings) -> "SoundConfig":
        return cls(
            enabled=bool(settings.enabled),
            file=(settings.file or "").strip(),
            output_device_index=settings.output_device,
            volume=float(settings.volume),
        )
