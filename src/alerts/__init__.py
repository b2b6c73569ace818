"""Public exports for timer transition alerts.

The sounddevice-backed chime lives in ``alerts.sound`` and is imported on
demand because sounddevice needs the PortAudio system library at import time.
"""

from .config import AlertConfigurationError, NotificationConfig, SoundConfig
from .desktop import DesktopNotifier
from .errors import AlertError, NotificationError, SoundError
from .service import AlertService, transition_message

__all__ = [
    "AlertConfigurationError",
    "AlertError",
    "AlertService",
    "DesktopNotifier",
    "NotificationConfig",
    "NotificationError",
    "SoundConfig",
    "SoundError",
    "transition_message",
]
