class AlertError(Exception):
    """Base exception for state-change alert delivery."""


class NotificationError(AlertError):
    """Raised when a desktop notification cannot be sent."""


class SoundError(AlertError):
    """Raised when the chime cannot be loaded or played."""
