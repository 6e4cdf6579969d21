"""Toast notifications shown on top of a parent widget."""

import html
import logging
from typing import Optional

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QLabel, QWidget

from touchee.config import get_touchee_config
from touchee.protocols.notifications import Notifier, Severity
from touchee.theming import ColorScheme

logger = logging.getLogger(__name__)

TOAST_MARGIN = 12


class ToastNotifier(Notifier):
    """
    Shows notifications as a timed, severity-colored label over a widget.

    Usage:
        notifier = ToastNotifier(main_window)
        register_notifier(notifier)
    """

    def __init__(self, parent: QWidget, color_scheme: Optional[ColorScheme] = None,
                 duration_ms: Optional[int] = None):
        self._parent = parent
        self._color_scheme = color_scheme or ColorScheme()
        self._duration_ms = duration_ms if duration_ms is not None else get_touchee_config().notification_duration_ms

        self._label = QLabel(parent)
        self._label.setWordWrap(True)
        self._label.setTextFormat(Qt.TextFormat.RichText)
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._label.hide()

        self._timer = QTimer(self._label)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._label.hide)

    @property
    def label(self) -> QLabel:
        return self._label

    def show(self, title: str, message: Optional[str], severity: Severity = Severity.INFO) -> None:
        logger.log(severity.log_level, f"{title}: {message}" if message else title)

        text = f"<b>{html.escape(title)}</b>"
        if message:
            text += f"<br>{html.escape(message)}"
        self._label.setText(text)
        self._label.setStyleSheet(self._color_scheme.notification_style(severity))

        width = max(self._parent.width() - 2 * TOAST_MARGIN, 100)
        self._label.setFixedWidth(width)
        self._label.adjustSize()
        self._label.move(TOAST_MARGIN, TOAST_MARGIN)
        self._label.show()
        self._label.raise_()

        self._timer.start(self._duration_ms)

    def hide(self) -> None:
        self._timer.stop()
        self._label.hide()
