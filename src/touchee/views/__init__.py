"""
Screens and the controller that navigates between them.
"""

from .navigation import NavigationManager
from .notifications import ToastNotifier
from .action_view import ActionView
from .edit_view import EditView
from .list_view import ListView
from .controller import (
    ToucheeController,
    ControllerActionHandler,
    LOG_IN,
    CLEAR,
    COMMIT,
    RESTORE,
    CLOSE,
    NEW_ITEM,
    DELETE,
)

__all__ = [
    "NavigationManager",
    "ToastNotifier",
    "ActionView",
    "EditView",
    "ListView",
    "ToucheeController",
    "ControllerActionHandler",
    "LOG_IN",
    "CLEAR",
    "COMMIT",
    "RESTORE",
    "CLOSE",
    "NEW_ITEM",
    "DELETE",
]
