"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    ControlSettings,
    NotificationSettings,
    RuntimeSettings,
    SoundSettings,
)

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: Optional[str],
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    return AppConfig(
        runtime=_parse_runtime_settings(_section(raw, "runtime")),
        control=_parse_control_settings(_section(raw, "control")),
        notifications=_parse_notification_settings(_section(raw, "notifications")),
        sound=_parse_sound_settings(_section(raw, "sound"), base_dir=base_dir),
        source_file=source_file,
    )


def log_level_value(name: str) -> int:
    return logging.getLevelName(name.upper())


def _parse_runtime_settings(section: Mapping[str, Any]) -> RuntimeSettings:
    poll_interval_seconds = _as_float(
        section.get("poll_interval_seconds", 0.25),
        "runtime.poll_interval_seconds",
    )
    if poll_interval_seconds <= 0:
        raise AppConfigurationError(
            "runtime.poll_interval_seconds must be greater than zero."
        )

    log_level = _as_str(section.get("log_level", "WARNING"), "runtime.log_level").upper()
    if log_level not in _ALLOWED_LOG_LEVELS:
        allowed = ", ".join(sorted(_ALLOWED_LOG_LEVELS))
        raise AppConfigurationError(f"runtime.log_level must be one of: {allowed}.")

    return RuntimeSettings(
        poll_interval_seconds=poll_interval_seconds,
        log_level=log_level,
    )


def _parse_control_settings(section: Mapping[str, Any]) -> ControlSettings:
    toggle_signal = _as_signal_name(
        section.get("toggle_signal", "SIGUSR1"),
        "control.toggle_signal",
    )
    reset_signal = _as_signal_name(
        section.get("reset_signal", "SIGUSR2"),
        "control.reset_signal",
    )
    if toggle_signal == reset_signal:
        raise AppConfigurationError(
            "control.toggle_signal and control.reset_signal must differ."
        )
    return ControlSettings(toggle_signal=toggle_signal, reset_signal=reset_signal)


def _parse_notification_settings(section: Mapping[str, Any]) -> NotificationSettings:
    return NotificationSettings(
        enabled=_as_bool(section.get("enabled", True), "notifications.enabled"),
        app_name=_as_str(section.get("app_name", "pomod"), "notifications.app_name"),
        summary=_as_str(
            section.get("summary", "pomod: time's up"),
            "notifications.summary",
        ),
        urgency=_as_str(
            section.get("urgency", "critical"),
            "notifications.urgency",
        ).lower(),
        timeout_ms=_as_int(section.get("timeout_ms", 5000), "notifications.timeout_ms"),
    )


def _parse_sound_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> SoundSettings:
    sound_file = _as_str(section.get("file", ""), "sound.file")
    return SoundSettings(
        enabled=_as_bool(section.get("enabled", True), "sound.enabled"),
        file=_resolve_path(base_dir, sound_file) if sound_file else "",
        output_device=(
            _as_int(section.get("output_device"), "sound.output_device")
            if "output_device" in section
            else None
        ),
        volume=_as_float(section.get("volume", 0.6), "sound.volume"),
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be a float.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be a float.") from error
    raise AppConfigurationError(f"{field} must be a float.")


def _as_signal_name(value: Any, field: str) -> str:
    name = _as_str(value, field).upper()
    if not name:
        raise AppConfigurationError(f"{field} is required.")
    if not name.startswith("SIG"):
        name = f"SIG{name}"
    return name


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
