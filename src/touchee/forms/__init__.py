"""
Form generation.

Declarative FormField descriptors on dataclass fields, immutable
FieldDefinitions built from them, and the builder/factory pair that turns a
dataclass into input widgets.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .field_descriptor import FormField, FieldHint, form_field
    from .field_definition import FieldDefinition
    from .form_builder import FormBuilder
    from .widget_factory import WidgetFactory

_EXPORTS = {
    "FormField": ("touchee.forms.field_descriptor", "FormField"),
    "FieldHint": ("touchee.forms.field_descriptor", "FieldHint"),
    "form_field": ("touchee.forms.field_descriptor", "form_field"),
    "get_form_field": ("touchee.forms.field_descriptor", "get_form_field"),
    "FORM_FIELD_KEY": ("touchee.forms.field_descriptor", "FORM_FIELD_KEY"),
    "DEFAULT_FIELD_IDENTIFIER": ("touchee.forms.field_descriptor", "DEFAULT_FIELD_IDENTIFIER"),
    "DEFAULT_FIELD_CAPTION": ("touchee.forms.field_descriptor", "DEFAULT_FIELD_CAPTION"),
    "FieldDefinition": ("touchee.forms.field_definition", "FieldDefinition"),
    "FormBuilder": ("touchee.forms.form_builder", "FormBuilder"),
    "WidgetFactory": ("touchee.forms.widget_factory", "WidgetFactory"),
    "WIDGET_TYPE_REGISTRY": ("touchee.forms.widget_factory", "WIDGET_TYPE_REGISTRY"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
