from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli as tomllib  # type: ignore

from app_config_parser import log_level_value, parse_app_config
from app_config_schema import (
    CONFIG_FILE_ENV,
    DEFAULT_CONFIG_DIR_NAME,
    DEFAULT_CONFIG_FILE,
    AppConfig,
    AppConfigurationError,
    ControlSettings,
    NotificationSettings,
    RuntimeSettings,
    SoundSettings,
)

__all__ = [
    "AppConfig",
    "AppConfigurationError",
    "ControlSettings",
    "NotificationSettings",
    "RuntimeSettings",
    "SoundSettings",
    "default_config_path",
    "load_app_config",
    "log_level_value",
    "resolve_config_path",
]


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    env = environ if environ is not None else os.environ
    config_home = env.get("XDG_CONFIG_HOME", "").strip()
    base_dir = Path(config_home).expanduser() if config_home else Path.home() / ".config"
    return base_dir / DEFAULT_CONFIG_DIR_NAME / DEFAULT_CONFIG_FILE


def resolve_config_path(
    config_path: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> tuple[Path, bool]:
    """Return the config path to load and whether it was explicitly requested."""
    env = environ if environ is not None else os.environ
    env_path = env.get(CONFIG_FILE_ENV, "").strip() or None
    raw = config_path or env_path
    if raw is None:
        return default_config_path(env), False

    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    return path, True


def load_app_config(
    config_path: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load configuration, falling back to defaults when no file exists.

    A file named explicitly (argument or environment variable) must exist.
    """
    path, explicit = resolve_config_path(config_path, environ=environ)
    if not path.exists():
        if explicit:
            raise AppConfigurationError(f"Config file not found: {path}")
        return parse_app_config({}, base_dir=path.parent, source_file=None)
    if not path.is_file():
        raise AppConfigurationError(f"Config path is not a file: {path}")

    try:
        with open(path, "rb") as fh:
            raw = tomllib.load(fh)
    except Exception as error:
        raise AppConfigurationError(f"Failed to parse config TOML: {error}") from error

    if not isinstance(raw, Mapping):
        raise AppConfigurationError("Root config TOML object must be a table.")

    return parse_app_config(raw, base_dir=path.parent, source_file=str(path))
