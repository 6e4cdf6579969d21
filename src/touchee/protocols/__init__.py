"""
Protocol definitions.

Action tokens and the handler contract, the notification capability, and the
widget value ABCs with their Qt adapters.
"""

from .actions import Action, ActionHandler, ActionResult
from .notifications import (
    Severity,
    Notifier,
    LoggingNotifier,
    register_notifier,
    get_notifier,
)
from .widget_protocols import ValueGettable, ValueSettable
from .widget_adapters import (
    LineEditAdapter,
    SpinBoxAdapter,
    DoubleSpinBoxAdapter,
    ComboBoxAdapter,
    CheckBoxAdapter,
    PyQtWidgetMeta,
)

__all__ = [
    "Action",
    "ActionHandler",
    "ActionResult",
    "Severity",
    "Notifier",
    "LoggingNotifier",
    "register_notifier",
    "get_notifier",
    "ValueGettable",
    "ValueSettable",
    "LineEditAdapter",
    "SpinBoxAdapter",
    "DoubleSpinBoxAdapter",
    "ComboBoxAdapter",
    "CheckBoxAdapter",
    "PyQtWidgetMeta",
]
