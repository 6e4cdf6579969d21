"""
Qt widget adapters implementing the value ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QSpinBox.value() vs QComboBox.currentData()
- QLineEdit.setText() vs QSpinBox.setValue() vs QComboBox.setCurrentIndex()

None is a first-class value everywhere: it means "nothing entered".
"""

from abc import ABCMeta
from enum import Enum
from typing import Any, Optional, Type

from PyQt6.QtWidgets import QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox, QCheckBox
from PyQt6.QtCore import QObject, Qt

from .widget_protocols import ValueGettable, ValueSettable


# Qt's metaclass and ABCMeta must be combined for widgets that inherit the ABCs
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable,
                      metaclass=PyQtWidgetMeta):
    """QLineEdit adapter. Blank text reads back as None.

    Surrounding whitespace is stripped, except in password mode where the
    text is returned exactly as typed.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._strip_whitespace = True

    def get_value(self) -> Any:
        text = self.text()
        if self._strip_whitespace:
            text = text.strip()
        return None if text == "" else text

    def set_value(self, value: Any) -> None:
        self.setText("" if value is None else str(value))

    def set_password_mode(self, enabled: bool = True) -> None:
        self._strip_whitespace = not enabled
        self.setEchoMode(QLineEdit.EchoMode.Password if enabled else QLineEdit.EchoMode.Normal)


class SpinBoxAdapter(QSpinBox, ValueGettable, ValueSettable,
                     metaclass=PyQtWidgetMeta):
    """
    QSpinBox adapter.

    The minimum value doubles as "no value" and is displayed blank through
    special value text.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSpecialValueText(" ")
        self.setRange(-2147483648, 2147483647)

    def get_value(self) -> Any:
        if self.value() == self.minimum() and self.specialValueText():
            return None
        return self.value()

    def set_value(self, value: Any) -> None:
        if value is None:
            self.setValue(self.minimum())
        else:
            self.setValue(int(value))


class DoubleSpinBoxAdapter(QDoubleSpinBox, ValueGettable, ValueSettable,
                           metaclass=PyQtWidgetMeta):
    """QDoubleSpinBox adapter with the same None convention as SpinBoxAdapter."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSpecialValueText(" ")
        self.setRange(-1e308, 1e308)
        self.setDecimals(6)

    def get_value(self) -> Any:
        if self.value() == self.minimum() and self.specialValueText():
            return None
        return self.value()

    def set_value(self, value: Any) -> None:
        if value is None:
            self.setValue(self.minimum())
        else:
            self.setValue(float(value))


class ComboBoxAdapter(QComboBox, ValueGettable, ValueSettable,
                      metaclass=PyQtWidgetMeta):
    """QComboBox adapter storing actual values in item data."""

    def get_value(self) -> Any:
        if self.currentIndex() < 0:
            return None
        return self.currentData()

    def set_value(self, value: Any) -> None:
        if value is None:
            self.setCurrentIndex(-1)
            return
        for i in range(self.count()):
            if self.itemData(i) == value:
                self.setCurrentIndex(i)
                return
        self.setCurrentIndex(-1)

    def set_enum_options(self, enum_type: Type[Enum]) -> None:
        """Populate with enum members, displaying their names."""
        self.clear()
        for member in enum_type:
            self.addItem(member.name, member)
        self.setCurrentIndex(-1)


class CheckBoxAdapter(QCheckBox, ValueGettable, ValueSettable,
                      metaclass=PyQtWidgetMeta):
    """QCheckBox adapter. Tristate partial check stands for None."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setTristate(False)

    def get_value(self) -> Optional[bool]:
        state = self.checkState()
        if state == Qt.CheckState.PartiallyChecked:
            return None
        return state == Qt.CheckState.Checked

    def set_value(self, value: Any) -> None:
        if value is None:
            self.setTristate(True)
            self.setCheckState(Qt.CheckState.PartiallyChecked)
        else:
            self.setTristate(False)
            self.setChecked(bool(value))
