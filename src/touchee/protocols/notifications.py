"""Notification capability.

Views and buttons report user-visible problems through a Notifier rather than
raising. Applications register a concrete notifier once at startup (for
example a ToastNotifier attached to the main window); until then messages go
to the log.

Example:
    register_notifier(ToastNotifier(main_window))
    get_notifier().show("Saved", "User updated", Severity.INFO)
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class Severity(Enum):
    """Notification severity levels."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def log_level(self) -> int:
        return {
            Severity.INFO: logging.INFO,
            Severity.WARNING: logging.WARNING,
            Severity.ERROR: logging.ERROR,
        }[self]


class Notifier(ABC):
    """ABC for objects that show notifications to the user."""

    @abstractmethod
    def show(self, title: str, message: Optional[str], severity: Severity = Severity.INFO) -> None:
        """
        Show a notification.

        Args:
            title: Short headline
            message: Optional longer description
            severity: How serious the notification is
        """
        pass


class LoggingNotifier(Notifier):
    """Notifier that writes notifications to the log. Used when nothing is registered."""

    def __init__(self, logger_name: str = "touchee.notifications"):
        self._logger = logging.getLogger(logger_name)

    def show(self, title: str, message: Optional[str], severity: Severity = Severity.INFO) -> None:
        self._logger.log(severity.log_level, f"{title}: {message}" if message else title)


_notifier: Optional[Notifier] = None


def register_notifier(notifier: Optional[Notifier]) -> None:
    """Register the global notifier.

    Args:
        notifier: Notifier instance, or None to fall back to logging
    """
    global _notifier
    _notifier = notifier


def get_notifier() -> Notifier:
    """Get the registered notifier, or a LoggingNotifier if none is registered."""
    if _notifier is None:
        return LoggingNotifier()
    return _notifier
