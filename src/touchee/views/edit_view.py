"""
Form screen generated from a dataclass.

Values are buffered in the input widgets: commit() writes them into the
backing item, discard() reloads them from it, clear() empties the inputs.
"""

from typing import Any, Dict, Optional
import logging

from PyQt6.QtWidgets import QFormLayout, QLabel

from touchee.data import BeanItem
from touchee.errors import ProcessingError, ValidationError
from touchee.forms import FieldDefinition, FormBuilder, WidgetFactory
from .action_view import ActionView

logger = logging.getLogger(__name__)


class EditView(ActionView):
    """Screen with one captioned input per field of a form."""

    def __init__(self, form_builder: FormBuilder, caption: str = "",
                 widget_factory: Optional[WidgetFactory] = None, parent=None):
        super().__init__(caption, parent=parent)
        self._form_builder = form_builder
        self._item: Optional[BeanItem] = None
        self._widgets: Dict[str, Any] = form_builder.build_widgets(widget_factory)

        form_layout = QFormLayout()
        for definition in form_builder.field_definitions:
            label = QLabel(definition.field_caption, self)
            label.setBuddy(self._widgets[definition.identifier])
            form_layout.addRow(label, self._widgets[definition.identifier])
        self.content_layout.addLayout(form_layout)
        self.content_layout.addStretch()

    @property
    def form_builder(self) -> FormBuilder:
        return self._form_builder

    def widget(self, identifier: str) -> Any:
        self._form_builder.definition(identifier)
        return self._widgets[identifier]

    # ========== DATA SOURCE ==========

    def set_item_data_source(self, item: Optional[BeanItem]) -> None:
        self._item = item
        self.discard()

    def get_item_data_source(self) -> Optional[BeanItem]:
        return self._item

    def field_values(self) -> Dict[str, Any]:
        """Current input values keyed by property id."""
        return {
            definition.property_id: self._widgets[definition.identifier].get_value()
            for definition in self._form_builder.field_definitions
        }

    def action_target(self) -> Any:
        return self.field_values()

    # ========== BUFFER OPERATIONS ==========

    def validate(self) -> None:
        """
        Check required fields.

        Raises:
            ValidationError: Naming every required field left empty
        """
        missing = [
            definition for definition in self._form_builder.field_definitions
            if definition.required and self._widgets[definition.identifier].get_value() in (None, "")
        ]
        if missing:
            captions = ", ".join(d.field_caption for d in missing)
            raise ValidationError(f"Required: {captions}", [d.identifier for d in missing])

    def commit(self) -> None:
        """
        Validate and write the input values into the backing item.

        Raises:
            ValidationError: If a required field is empty
            ProcessingError: If there is no item to write to
        """
        if self._item is None:
            raise ProcessingError("Nothing to save: the form has no item")
        self.validate()

        values = {
            definition.property_id: self._committed_value(definition, self._widgets[definition.identifier].get_value())
            for definition in self._form_builder.field_definitions
        }
        self._item.set_values(values)
        logger.info(f"Committed item {self._item.item_id}")

    def discard(self) -> None:
        """Reload the inputs from the backing item, or clear them if there is none."""
        if self._item is None:
            self.clear()
            return
        for definition in self._form_builder.field_definitions:
            self._widgets[definition.identifier].set_value(self._item.get_value(definition.property_id))

    def clear(self) -> None:
        for widget in self._widgets.values():
            widget.set_value(None)

    @staticmethod
    def _committed_value(definition: FieldDefinition, value: Any) -> Any:
        # text fields store "" rather than None
        if value is None and definition.value_type is str:
            return ""
        return value
