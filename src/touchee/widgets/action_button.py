"""
Buttons that fire actions on a handler when clicked.

ActionButton holds the plumbing shared by action-firing buttons: the handler
to delegate to, an optional sender override and the target context.
SequenceActionButton fires an ordered list of actions and stops at the first
one that fails, showing the failure as an error notification.

Usage:
    button = SequenceActionButton("Save", COMMIT, CLOSE, handler=view, sender=view)
    button.set_target_provider(view.field_values)
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Tuple
import logging

from PyQt6.QtWidgets import QPushButton

from touchee.protocols import (
    Action, ActionHandler, ActionResult, Notifier, PyQtWidgetMeta, Severity, get_notifier,
)

logger = logging.getLogger(__name__)


class ActionButton(QPushButton, ABC, metaclass=PyQtWidgetMeta):
    """Base class for buttons that delegate clicks to an ActionHandler."""

    def __init__(self, caption: str = "", parent=None):
        # sip-wrapped classes skip the ABC instantiation check
        if type(self).__abstractmethods__:
            raise TypeError(
                f"Can't instantiate abstract class {type(self).__name__} "
                f"with abstract methods {sorted(type(self).__abstractmethods__)}"
            )
        super().__init__(caption, parent)
        self._handler: Optional[ActionHandler] = None
        self._sender: Any = None
        self._target: Any = None
        self._target_provider: Optional[Callable[[], Any]] = None
        self._notifier: Optional[Notifier] = None
        self.clicked.connect(lambda checked=False: self.on_activate())

    def get_handler(self) -> Optional[ActionHandler]:
        return self._handler

    def set_handler(self, handler: Optional[ActionHandler]) -> None:
        self._handler = handler

    def get_sender(self) -> Any:
        return self._sender

    def set_sender(self, sender: Any) -> None:
        """Override the sender passed to the handler. None means the button itself."""
        self._sender = sender

    def get_target(self) -> Any:
        """Resolve the target context: the provider's result if one is set, else the fixed target."""
        if self._target_provider is not None:
            return self._target_provider()
        return self._target

    def set_target(self, target: Any) -> None:
        self._target = target
        self._target_provider = None

    def set_target_provider(self, provider: Optional[Callable[[], Any]]) -> None:
        """Resolve the target lazily, at activation time."""
        self._target_provider = provider

    def set_notifier(self, notifier: Optional[Notifier]) -> None:
        self._notifier = notifier

    def get_notifier(self) -> Notifier:
        return self._notifier or get_notifier()

    @abstractmethod
    def on_activate(self) -> List[ActionResult]:
        """Called when the button is clicked. Must not raise."""
        pass


class SequenceActionButton(ActionButton):
    """
    A button that, when clicked, runs a series of actions on its handler.

    Any failure while handling one of the actions stops the sequence and a
    notification is shown. Nothing is raised out of the click.
    """

    def __init__(self, caption: str, *actions: Action, handler: Optional[ActionHandler] = None,
                 sender: Any = None, parent=None):
        super().__init__(caption, parent)
        self._actions: List[Action] = list(actions)
        self.set_handler(handler)
        self.set_sender(sender)

    def on_activate(self) -> List[ActionResult]:
        handler = self.get_handler()
        if handler is None or not self._actions:
            return []

        sender = self if self.get_sender() is None else self.get_sender()
        target = self.get_target()
        results: List[ActionResult] = []

        # iterate over a copy, handlers may change the button's actions
        for action in list(self._actions):
            result = handler.process_action(action, sender, target)
            results.append(result)
            if not result.ok:
                logger.debug(f"Sequence on '{self.text()}' stopped at {action.caption!r}")
                self.get_notifier().show("Error", result.message, Severity.ERROR)
                break
        return results

    def add_actions(self, *actions: Action) -> None:
        """Append actions; duplicates are allowed."""
        self._actions.extend(actions)

    def remove_actions(self, *actions: Action) -> None:
        """Remove the first occurrence of each action. Missing actions are ignored."""
        for action in actions:
            for i, existing in enumerate(self._actions):
                if existing is action:
                    del self._actions[i]
                    break

    def contains_action(self, action: Action) -> bool:
        return any(existing is action for existing in self._actions)

    def get_actions(self) -> Tuple[Action, ...]:
        """Snapshot of the registered actions. Later changes to the button are not reflected."""
        return tuple(self._actions)
