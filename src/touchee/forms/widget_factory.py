"""
Widget factory with explicit type-based dispatch.

Design:
- WIDGET_TYPE_REGISTRY: Type → factory function mapping
- Explicit dispatch (no hasattr checks)
- Fail-loud if type not registered
- Handles Optional[T] and Enum types
- Applies FieldHint metadata from the field definition
"""

from typing import Any, Callable, Dict, Type, Union, get_args, get_origin
from enum import Enum
import logging

from touchee.protocols.widget_adapters import (
    LineEditAdapter, SpinBoxAdapter, DoubleSpinBoxAdapter,
    ComboBoxAdapter, CheckBoxAdapter,
)
from .field_definition import FieldDefinition
from .field_descriptor import FieldHint

logger = logging.getLogger(__name__)

# Maps Python type → widget factory function
WIDGET_TYPE_REGISTRY: Dict[Type, Callable[[], Any]] = {
    str: LineEditAdapter,
    int: SpinBoxAdapter,
    float: DoubleSpinBoxAdapter,
    bool: CheckBoxAdapter,
}


def resolve_optional(param_type: Type) -> Type:
    """
    Resolve Optional[T] to T.

    Args:
        param_type: Type to resolve (e.g., Optional[int])

    Returns:
        Unwrapped type (e.g., int)
    """
    if get_origin(param_type) is Union:
        args = get_args(param_type)
        if len(args) == 2 and type(None) in args:
            return next(arg for arg in args if arg is not type(None))
    return param_type


def is_enum_type(param_type: Type) -> bool:
    return isinstance(param_type, type) and issubclass(param_type, Enum)


class WidgetFactory:
    """
    Creates input widgets for field definitions.

    Example:
        factory = WidgetFactory()
        widget = factory.create_widget(definition)
        widget.set_value("miki")
    """

    def __init__(self, registry: Dict[Type, Callable[[], Any]] = None):
        self._registry = dict(WIDGET_TYPE_REGISTRY)
        if registry:
            self._registry.update(registry)

    def create_widget_for_type(self, value_type: Type) -> Any:
        """
        Create a widget for a bare type.

        Raises:
            TypeError: If no widget is registered for the type
        """
        resolved = resolve_optional(value_type)

        if is_enum_type(resolved):
            widget = ComboBoxAdapter()
            widget.set_enum_options(resolved)
            return widget

        factory = self._registry.get(resolved)
        if factory is None:
            raise TypeError(
                f"No widget registered for type {resolved!r}. "
                f"Registered types: {[t.__name__ for t in self._registry]}"
            )
        return factory()

    def create_widget(self, definition: FieldDefinition) -> Any:
        """Create and configure the widget for a field definition."""
        widget = self.create_widget_for_type(definition.value_type)
        widget.setObjectName(definition.identifier)

        if definition.has_hint(FieldHint.PASSWORD):
            if not isinstance(widget, LineEditAdapter):
                raise TypeError(
                    f"Field '{definition.identifier}' has PASSWORD hint but is not a text field"
                )
            widget.set_password_mode(True)
        if definition.has_hint(FieldHint.READ_ONLY):
            widget.setEnabled(False)

        logger.debug(f"Created {type(widget).__name__} for field '{definition.identifier}'")
        return widget
