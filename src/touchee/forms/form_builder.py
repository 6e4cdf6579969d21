"""
Form builder: dataclass fields → field definitions → widgets.

The dataclass is scanned once, when the builder is created. Each field that
carries a FormField descriptor for the requested form becomes a
FieldDefinition; widgets are created from the definitions on demand.
"""

import dataclasses
import typing
from typing import Any, Dict, Optional, Tuple, Type
import logging

from .field_definition import FieldDefinition
from .field_descriptor import get_form_field
from .widget_factory import WidgetFactory, resolve_optional

logger = logging.getLogger(__name__)


class FormBuilder:
    """
    Builds the field definitions of one named form of a dataclass.

    Example:
        builder = FormBuilder(User, "login")
        [d.identifier for d in builder.field_definitions]  # ['username', 'password']
        widgets = builder.build_widgets()
    """

    def __init__(self, bean_type: Type, form_name: Optional[str] = None):
        if not dataclasses.is_dataclass(bean_type) or not isinstance(bean_type, type):
            raise TypeError(f"FormBuilder needs a dataclass type, got {bean_type!r}")

        self.bean_type = bean_type
        self.form_name = form_name
        self._definitions: Dict[str, FieldDefinition] = self._scan()

    def _scan(self) -> Dict[str, FieldDefinition]:
        hints = typing.get_type_hints(self.bean_type)
        definitions: Dict[str, FieldDefinition] = {}

        for field in dataclasses.fields(self.bean_type):
            annotation = get_form_field(field)
            if annotation is None or not annotation.belongs_to(self.form_name):
                continue

            value_type = resolve_optional(hints.get(field.name, field.type))
            definition = FieldDefinition.from_form_field(annotation, field.name, value_type)
            if definition.identifier in definitions:
                raise ValueError(
                    f"Duplicate form field identifier '{definition.identifier}' "
                    f"in {self.bean_type.__name__}"
                )
            definitions[definition.identifier] = definition

        logger.debug(
            f"Scanned {self.bean_type.__name__} for form {self.form_name!r}: "
            f"{list(definitions)}"
        )
        return definitions

    @property
    def field_definitions(self) -> Tuple[FieldDefinition, ...]:
        return tuple(self._definitions.values())

    def definition(self, identifier: str) -> FieldDefinition:
        """
        Look up a field definition by identifier.

        Raises:
            KeyError: If the form has no such field
        """
        if identifier not in self._definitions:
            raise KeyError(
                f"No field '{identifier}' in form {self.form_name!r}. "
                f"Available fields: {list(self._definitions)}"
            )
        return self._definitions[identifier]

    def build_widgets(self, factory: Optional[WidgetFactory] = None) -> Dict[str, Any]:
        """Create one widget per field definition, keyed by identifier, in field order."""
        factory = factory or WidgetFactory()
        return {
            definition.identifier: factory.create_widget(definition)
            for definition in self._definitions.values()
        }
