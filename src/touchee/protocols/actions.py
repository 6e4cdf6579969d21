"""
Action tokens and the handler contract.

An Action is an identity-distinct intent token with a display caption. Two
actions with the same caption are different actions: equality and hashing are
by identity, so actions can key a handler table directly.

ActionHandler is the capability that reacts to actions. Subclasses implement
handle_action(), which may raise. Callers that must not fail (buttons) use
process_action(), which turns any fault into an explicit ActionResult.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence
import logging

from touchee.errors import ProcessingError

logger = logging.getLogger(__name__)


class Action:
    """User-triggerable intent with a display caption. Compared by identity."""

    def __init__(self, caption: str):
        self.caption = caption

    def __repr__(self) -> str:
        return f"Action({self.caption!r})"


@dataclass(frozen=True)
class ActionResult:
    """Outcome of processing a single action."""
    action: Action
    ok: bool
    message: Optional[str] = None

    @classmethod
    def success(cls, action: Action) -> "ActionResult":
        return cls(action=action, ok=True)

    @classmethod
    def failure(cls, action: Action, message: str) -> "ActionResult":
        return cls(action=action, ok=False, message=message)


class ActionHandler(ABC):
    """
    ABC for objects that react to actions.

    handle_action() does the work and signals problems by raising
    ProcessingError (or anything else). get_actions() advertises the actions
    the handler offers for a given target/sender pair.
    """

    @abstractmethod
    def handle_action(self, action: Action, sender: Any, target: Any) -> None:
        """
        React to an action.

        Args:
            action: The action to perform
            sender: Object the action originates from (usually a view or button)
            target: Context object the action applies to (item id, form values, ...)

        Raises:
            ProcessingError: If the action cannot be performed
        """
        pass

    def get_actions(self, target: Any, sender: Any) -> Sequence[Action]:
        """Return actions available for target/sender. Empty by default."""
        return ()

    def process_action(self, action: Action, sender: Any, target: Any) -> ActionResult:
        """
        Handle an action and report the outcome instead of raising.

        Returns:
            ActionResult.success, or ActionResult.failure carrying the fault message
        """
        try:
            self.handle_action(action, sender, target)
        except ProcessingError as e:
            logger.info(f"Action {action.caption!r} failed: {e}")
            return ActionResult.failure(action, str(e))
        except Exception as e:
            logger.exception(f"Unexpected error while processing action {action.caption!r}")
            return ActionResult.failure(action, str(e) or type(e).__name__)
        return ActionResult.success(action)
