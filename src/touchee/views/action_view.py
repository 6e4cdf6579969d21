"""
Base class for screens that offer actions.

An ActionView is both a widget and an ActionHandler: its buttons send their
actions to the view, and the view forwards them to every handler registered
with add_action_handler() (normally the controller). The actions of all
buttons are what the view advertises through get_actions().
"""

from typing import Any, List, Optional, Sequence, Tuple
import logging

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from touchee.protocols import (
    Action, ActionHandler, ActionResult, Notifier, PyQtWidgetMeta, Severity, get_notifier,
)
from touchee.theming import ColorScheme
from touchee.widgets import SequenceActionButton

logger = logging.getLogger(__name__)


class ActionView(QWidget, ActionHandler, metaclass=PyQtWidgetMeta):
    """Screen with a caption, a content area and a row of action buttons."""

    def __init__(self, caption: str = "", color_scheme: Optional[ColorScheme] = None, parent=None):
        super().__init__(parent)
        self._handlers: List[ActionHandler] = []
        self._buttons: List[SequenceActionButton] = []
        self._notifier: Optional[Notifier] = None
        self._color_scheme = color_scheme or ColorScheme()

        layout = QVBoxLayout(self)
        self._caption_label = QLabel(self)
        self._caption_label.setStyleSheet(self._color_scheme.caption_style())
        layout.addWidget(self._caption_label)

        self.content_layout = QVBoxLayout()
        layout.addLayout(self.content_layout, 1)

        self._button_bar = QHBoxLayout()
        layout.addLayout(self._button_bar)

        self.set_caption(caption)

    # ========== CAPTION ==========

    def set_caption(self, caption: str) -> None:
        self.setWindowTitle(caption)
        self._caption_label.setText(caption)
        self._caption_label.setVisible(bool(caption))

    def caption(self) -> str:
        return self.windowTitle()

    # ========== NOTIFICATIONS ==========

    def set_notifier(self, notifier: Optional[Notifier]) -> None:
        self._notifier = notifier
        for button in self._buttons:
            button.set_notifier(notifier)

    def get_notifier(self) -> Notifier:
        return self._notifier or get_notifier()

    # ========== HANDLERS ==========

    def add_action_handler(self, handler: ActionHandler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def remove_action_handler(self, handler: ActionHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def handle_action(self, action: Action, sender: Any, target: Any) -> None:
        """Forward the action to every registered handler."""
        if not self._handlers:
            logger.debug(f"{type(self).__name__} has no handlers for {action.caption!r}")
            return
        for handler in list(self._handlers):
            handler.handle_action(action, sender, target)

    def fire_action(self, action: Action, target: Any = None) -> ActionResult:
        """Process an action raised by the view itself, notifying on failure."""
        result = self.process_action(action, self, target)
        if not result.ok:
            self.get_notifier().show("Error", result.message, Severity.ERROR)
        return result

    # ========== BUTTONS ==========

    def action_target(self) -> Any:
        """Target passed with button actions. Resolved on every click."""
        return None

    def add_action(self, *actions: Action, caption: Optional[str] = None) -> SequenceActionButton:
        """
        Add a button that fires actions in sequence.

        Args:
            actions: Actions to run, in order
            caption: Button caption; defaults to the first action's caption

        Returns:
            The created button
        """
        if not actions:
            raise ValueError("add_action needs at least one action")

        button = SequenceActionButton(
            caption if caption is not None else actions[0].caption,
            *actions,
            handler=self,
            sender=self,
            parent=self,
        )
        button.set_target_provider(self.action_target)
        button.set_notifier(self._notifier)
        self._buttons.append(button)
        self._button_bar.addWidget(button)
        return button

    @property
    def buttons(self) -> Tuple[SequenceActionButton, ...]:
        return tuple(self._buttons)

    def get_actions(self, target: Any, sender: Any) -> Sequence[Action]:
        actions: List[Action] = []
        for button in self._buttons:
            for action in button.get_actions():
                if not any(existing is action for existing in actions):
                    actions.append(action)
        return tuple(actions)
