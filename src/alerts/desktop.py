"""Desktop notifications sent through the freedesktop ``notify-send`` tool."""

import logging
import shutil
import subprocess
from typing import Optional

from .config import NotificationConfig
from .errors import NotificationError


class DesktopNotifier:
    """Fire-and-forget desktop notifications; never waits for delivery."""
    def __init__(
        self,
        config: NotificationConfig,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config
        self._logger = logger or logging.getLogger(__name__)

    def build_command(self, summary: str, body: str) -> list[str]:
        return [
            "notify-send",
            f"--app-name={self._config.app_name}",
            f"--urgency={self._config.urgency}",
            f"--expire-time={self._config.timeout_ms}",
            summary,
            body,
        ]

    def notify(self, body: str) -> None:
        if shutil.which("notify-send") is None:
            raise NotificationError("notify-send was not found on PATH")

        command = self.build_command(self._config.summary, body)
        self._logger.debug("Sending desktop notification: %s", body)
        try:
            subprocess.Popen(
                command,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as error:
            raise NotificationError(
                f"Failed to send desktop notification: {error}"
            ) from error
