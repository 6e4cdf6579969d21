"""
Controller for touchee navigation.

The controller owns the navigation stack, the user container and a table
mapping actions to handlers. Views register the controller as their action
handler; every action a view fires ends up in handle_action(), which looks
the action up by identity and delegates.

Screens and transitions:
    Login --(Log in, valid credentials)--> List
    List  --(Choose / New)--> Edit
    Edit  --(Leave)--> previous screen
Save, Undo and Clear act on the edit form in place; Delete marked removes
the marked rows of the list in place.
"""

from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence
import logging

from touchee.config import ToucheeConfig, get_touchee_config
from touchee.data import BeanItem, BeanItemContainer, Session, User
from touchee.errors import ProcessingError, UnresolvedActionError
from touchee.forms import FormBuilder
from touchee.protocols import Action, ActionHandler, Notifier, Severity, get_notifier
from .edit_view import EditView
from .list_view import ListView
from .navigation import NavigationManager

logger = logging.getLogger(__name__)

LOG_IN = Action("Log in")
CLEAR = Action("Clear")
COMMIT = Action("Save")
RESTORE = Action("Undo")
CLOSE = Action("Leave")
NEW_ITEM = Action("New")
DELETE = Action("Delete marked")

HandlerCallback = Callable[["ToucheeController", Any, Any], None]


class ControllerActionHandler(ActionHandler):
    """Handles one action by calling callback(controller, sender, target)."""

    def __init__(self, controller: "ToucheeController", action: Action, callback: HandlerCallback):
        self.controller = controller
        self.action = action
        self.callback = callback

    def handle_action(self, action: Action, sender: Any, target: Any) -> None:
        self.callback(self.controller, sender, target)

    def get_actions(self, target: Any, sender: Any) -> Sequence[Action]:
        return (self.action,)


def create_users_container(emails: Iterable[str]) -> BeanItemContainer:
    """Container of users seeded from e-mail addresses."""
    return BeanItemContainer(User, (User.from_email(email) for email in emails))


def user_caption(user: User) -> str:
    return f"{user.username} <{user.email}>" if user.email else user.username


# ========== HANDLER CALLBACKS ==========

def _edit_view(sender: Any) -> EditView:
    if not isinstance(sender, EditView):
        raise ProcessingError(f"Action needs an edit form, got {type(sender).__name__}")
    return sender


def _list_view(sender: Any) -> ListView:
    if not isinstance(sender, ListView) or sender.get_container_data_source() is None:
        raise ProcessingError(f"Action needs a list with data, got {type(sender).__name__}")
    return sender


def log_in(controller: "ToucheeController", sender: Any, target: Any) -> None:
    if not isinstance(target, Mapping):
        raise ProcessingError("Log in needs the login form values")

    config = controller.config
    username = target.get("username")
    if username == config.login_username and target.get("password") == config.login_password:
        controller.session.user = User(username=username)
        logger.info(f"User {username!r} logged in")
        controller.manager.navigate_to(controller.create_list_view())
    else:
        logger.warning(f"Rejected login for {username!r}")
        controller.notifier.show(
            "Invalid credentials",
            f"Please log in as {config.login_username}/{config.login_password}",
            Severity.WARNING,
        )


def clear_form(controller: "ToucheeController", sender: Any, target: Any) -> None:
    _edit_view(sender).clear()


def commit_form(controller: "ToucheeController", sender: Any, target: Any) -> None:
    _edit_view(sender).commit()


def restore_form(controller: "ToucheeController", sender: Any, target: Any) -> None:
    _edit_view(sender).discard()


def close_view(controller: "ToucheeController", sender: Any, target: Any) -> None:
    controller.manager.navigate_back()


def delete_marked(controller: "ToucheeController", sender: Any, target: Any) -> None:
    view = _list_view(sender)
    marked = view.marked_items()
    removed = view.get_container_data_source().remove_items(marked)
    logger.info(f"Deleted {removed} marked item(s)")


def choose_item(controller: "ToucheeController", sender: Any, target: Any) -> None:
    view = _list_view(sender)
    item = view.get_container_data_source().get_item(target)
    if item is None:
        raise ProcessingError(f"No item with id {target!r}")
    controller.manager.navigate_to(controller.create_edit_view(item))


def new_item(controller: "ToucheeController", sender: Any, target: Any) -> None:
    container = _list_view(sender).get_container_data_source()
    item_id = container.add_item()
    controller.manager.navigate_to(controller.create_edit_view(container.get_item(item_id)))


DEFAULT_HANDLERS = (
    (LOG_IN, log_in),
    (CLEAR, clear_form),
    (CLOSE, close_view),
    (DELETE, delete_marked),
    (COMMIT, commit_form),
    (RESTORE, restore_form),
    (ListView.CHOOSE_ITEM_ACTION, choose_item),
    (NEW_ITEM, new_item),
)


class ToucheeController(ActionHandler):
    """
    Maps actions to handlers and drives screen navigation.

    Usage:
        window = QMainWindow()
        controller = ToucheeController(window, notifier=ToastNotifier(window))
        controller.navigate_to_start()
    """

    def __init__(self, window=None, notifier: Optional[Notifier] = None,
                 session: Optional[Session] = None,
                 container: Optional[BeanItemContainer] = None,
                 config: Optional[ToucheeConfig] = None):
        self._config = config or get_touchee_config()
        self._manager = NavigationManager()
        if window is not None:
            window.setCentralWidget(self._manager)

        self._notifier = notifier
        self._session = session if session is not None else Session()
        if container is None:
            container = create_users_container(self._config.sample_user_emails)
        self._container = container

        self._action_handlers: Dict[Action, ActionHandler] = {}
        self._ignoring_unregistered_actions = self._config.ignoring_unregistered_actions

        for action, callback in DEFAULT_HANDLERS:
            self.set_action_handler(action, ControllerActionHandler(self, action, callback))

    # ========== PROPERTIES ==========

    @property
    def manager(self) -> NavigationManager:
        return self._manager

    @property
    def container(self) -> BeanItemContainer:
        return self._container

    @property
    def session(self) -> Session:
        return self._session

    @property
    def config(self) -> ToucheeConfig:
        return self._config

    @property
    def notifier(self) -> Notifier:
        return self._notifier or get_notifier()

    @property
    def ignoring_unregistered_actions(self) -> bool:
        """Whether unregistered actions do nothing (True) or show an error (False)."""
        return self._ignoring_unregistered_actions

    @ignoring_unregistered_actions.setter
    def ignoring_unregistered_actions(self, value: bool) -> None:
        self._ignoring_unregistered_actions = value

    # TODO accept the bean types to list and edit instead of always using User
    def configure(self, config: Optional[ToucheeConfig] = None) -> None:
        """Apply configuration to a running controller."""
        if config is None:
            return
        self._config = config
        self._ignoring_unregistered_actions = config.ignoring_unregistered_actions
        logger.debug(f"Controller configured: ignoring_unregistered_actions={config.ignoring_unregistered_actions}")

    # ========== VIEWS ==========

    def create_list_view(self) -> ListView:
        view = ListView(self._config.list_caption, item_caption=user_caption)
        view.add_action(NEW_ITEM)
        view.add_action(DELETE)
        view.set_notifier(self._notifier)
        view.add_action_handler(self)
        view.set_container_data_source(self._container)
        return view

    def create_edit_view(self, item: BeanItem) -> EditView:
        backend = type(item.bean)
        view = EditView(FormBuilder(backend, "edit"), f"Edit {backend.__name__.lower()}")
        view.set_item_data_source(item)

        view.add_action(COMMIT, CLOSE, caption="Save")
        view.add_action(RESTORE, CLOSE)
        view.set_notifier(self._notifier)
        view.add_action_handler(self)
        return view

    def create_login_view(self) -> EditView:
        view = EditView(FormBuilder(User, "login"), self._config.login_caption)
        view.add_action(LOG_IN, CLEAR)
        view.set_notifier(self._notifier)
        view.add_action_handler(self)
        return view

    def navigate_to_start(self) -> None:
        if not self._session.is_authenticated:
            self._manager.navigate_to(self.create_login_view())
        else:
            self._manager.navigate_to(self.create_list_view())

    # ========== DISPATCH ==========

    def get_actions(self, target: Any, sender: Any) -> Sequence[Action]:
        current = self._manager.current_view()
        if isinstance(current, ActionHandler):
            return tuple(current.get_actions(target, sender))
        return ()

    def set_action_handler(self, action: Action, handler: ActionHandler) -> None:
        """
        Set the handler for an action, replacing any previous one.

        Args:
            action: Action to handle
            handler: Handler to forward the action to
        """
        self._action_handlers[action] = handler
        logger.debug(f"Registered handler for {action.caption!r}")

    def remove_action_handler(self, action: Action) -> None:
        """Remove the handler for an action, if any."""
        if self._action_handlers.pop(action, None) is not None:
            logger.debug(f"Removed handler for {action.caption!r}")

    def get_action_handler(self, action: Action) -> Optional[ActionHandler]:
        return self._action_handlers.get(action)

    def handle_action(self, action: Action, sender: Any, target: Any) -> None:
        handler = self._action_handlers.get(action)
        if handler is not None:
            handler.handle_action(action, sender, target)
        elif not self._ignoring_unregistered_actions:
            self.notifier.show("Cannot perform action", str(UnresolvedActionError(action)), Severity.ERROR)
        else:
            logger.debug(f"Ignoring unregistered action {action.caption!r}")
