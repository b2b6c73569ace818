"""pomod: a pomodoro timer for status bars, controlled with process signals.

Send the toggle signal (SIGUSR1 by default) to start or pause the timer and
the reset signal (SIGUSR2) to reset it, e.g. ``pkill -USR1 -f pomod``.
"""

import logging
import sys
from typing import Optional

from alerts import (
    AlertConfigurationError,
    AlertService,
    DesktopNotifier,
    NotificationConfig,
    SoundConfig,
    SoundError,
)
from app_config import (
    AppConfig,
    AppConfigurationError,
    load_app_config,
    log_level_value,
    resolve_config_path,
)
from runtime import (
    ControlConfigurationError,
    QueueControlChannel,
    RuntimeBootstrap,
    RuntimeEngine,
    RuntimeHooks,
    StatusLineWriter,
    install_signal_handlers,
    restore_signal_handlers,
)


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure logging for the application.

    Log records go to stderr; stdout carries only the status lines.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    return logging.getLogger("pomod")


def build_alert_service(app_config: AppConfig, logger: logging.Logger) -> AlertService:
    notifier: Optional[DesktopNotifier] = None
    notification_config = NotificationConfig.from_settings(app_config.notifications)
    if notification_config.enabled:
        notifier = DesktopNotifier(
            config=notification_config,
            logger=logging.getLogger("alerts.desktop"),
        )

    chime = None
    sound_config = SoundConfig.from_settings(app_config.sound)
    if sound_config.enabled:
        try:
            from alerts.sound import SoundDeviceChime

            chime = SoundDeviceChime(
                config=sound_config,
                logger=logging.getLogger("alerts.sound"),
            )
        except (OSError, SoundError) as error:
            logger.warning("Chime disabled: %s", error)

    return AlertService(
        notifier=notifier,
        chime=chime,
        logger=logging.getLogger("alerts"),
    )


def main() -> int:
    """Run the pomodoro timer until asked to quit."""
    logger = setup_logging()

    try:
        app_config = load_app_config()
    except AppConfigurationError as error:
        logger.error("App configuration error: %s", error)
        return 1

    logging.getLogger().setLevel(log_level_value(app_config.runtime.log_level))
    if app_config.source_file:
        logger.info("Loaded runtime config: %s", app_config.source_file)
    else:
        config_path, _ = resolve_config_path()
        logger.info("No config file at %s, using defaults", config_path)

    try:
        alert_service = build_alert_service(app_config, logger)
    except AlertConfigurationError as error:
        logger.error("Alert configuration error: %s", error)
        return 1

    channel = QueueControlChannel()
    try:
        installed_signals = install_signal_handlers(
            channel,
            toggle_signal=app_config.control.toggle_signal,
            reset_signal=app_config.control.reset_signal,
            logger=logging.getLogger("runtime.controls"),
        )
    except ControlConfigurationError as error:
        logger.error("Control configuration error: %s", error)
        return 1

    engine = RuntimeEngine(
        RuntimeBootstrap(
            logger=logging.getLogger("runtime"),
            channel=channel,
            output=StatusLineWriter(sys.stdout),
            on_state_change=alert_service.on_transition,
            poll_interval_seconds=app_config.runtime.poll_interval_seconds,
            hooks=RuntimeHooks(
                on_shutdown=lambda: restore_signal_handlers(installed_signals),
            ),
        )
    )
    return engine.run()


if __name__ == "__main__":
    sys.exit(main())
