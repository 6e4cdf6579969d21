"""
Widget ABC contracts for form inputs.

Every input created by the form builder implements these, so views can read
and write values without caring whether the widget is a line edit, a spin box
or a combo box.
"""

from abc import ABC, abstractmethod
from typing import Any


class ValueGettable(ABC):
    """ABC for widgets that can return a value."""

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """ABC for widgets that can accept a value."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value.

        Args:
            value: The value to set. None clears the widget.
        """
        pass

