"""
Single-window navigation stack.

Screens are pushed with navigate_to() and popped with navigate_back(); only
the top screen is visible. Popped screens are released with deleteLater().
"""

import logging
from typing import List, Optional

from PyQt6.QtWidgets import QStackedWidget, QWidget

logger = logging.getLogger(__name__)


class NavigationManager(QStackedWidget):
    """Stack of screens with forward/back navigation."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._history: List[QWidget] = []

    def navigate_to(self, view: QWidget) -> None:
        """Push view on the stack and show it."""
        self.addWidget(view)
        self._history.append(view)
        self.setCurrentWidget(view)
        logger.debug(f"[NAV] -> {type(view).__name__} (depth {len(self._history)})")

    def navigate_back(self) -> bool:
        """
        Pop the current view and show the previous one.

        Returns:
            False if there is no previous view to go back to
        """
        if len(self._history) < 2:
            logger.debug("[NAV] navigate_back ignored, nothing to go back to")
            return False

        popped = self._history.pop()
        self.removeWidget(popped)
        popped.deleteLater()

        current = self._history[-1]
        self.setCurrentWidget(current)
        logger.debug(f"[NAV] <- {type(current).__name__} (depth {len(self._history)})")
        return True

    def current_view(self) -> Optional[QWidget]:
        return self._history[-1] if self._history else None

    def depth(self) -> int:
        return len(self._history)
