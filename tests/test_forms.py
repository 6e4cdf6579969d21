"""Tests for field definitions, the form builder and the widget factory."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pytest

from touchee.forms import (
    DEFAULT_FIELD_CAPTION,
    DEFAULT_FIELD_IDENTIFIER,
    FieldDefinition,
    FieldHint,
    FormBuilder,
    FormField,
    WidgetFactory,
    form_field,
)


class Colour(Enum):
    RED = 1
    GREEN = 2


@dataclass
class Gadget:
    name: str = form_field(default="", required=True)
    serialNumber: str = form_field(default="", identifier="serial", caption="Serial no.", forms=("edit",))
    weight: Optional[float] = form_field(default=None, forms=("edit",))
    count: int = form_field(default=0, info=(FieldHint.READ_ONLY, "opaque"))
    enabled: bool = form_field(default=True, forms=("edit",))
    colour: Colour = form_field(default=Colour.RED, forms=("edit",))
    notes: str = ""


@pytest.mark.parametrize("field_name", ["username", "email", "x"])
def test_default_identifier_is_field_name(field_name):
    """Sentinel identifier resolves to the field name."""
    definition = FieldDefinition.from_form_field(FormField(), field_name, str)
    assert definition.identifier == field_name
    assert definition.property_id == field_name


def test_literal_identifier_and_caption_are_kept():
    annotation = FormField(identifier="login", caption="User name")
    definition = FieldDefinition.from_form_field(annotation, "username", str)
    assert definition.identifier == "login"
    assert definition.field_caption == "User name"
    assert definition.property_id == "username"


@pytest.mark.parametrize("field_name,caption", [
    ("username", "Username"),
    ("serialNumber", "SerialNumber"),
    ("eMail", "EMail"),
    ("a", "A"),
])
def test_default_caption_upper_cases_first_character_only(field_name, caption):
    annotation = FormField(identifier=DEFAULT_FIELD_IDENTIFIER, caption=DEFAULT_FIELD_CAPTION)
    definition = FieldDefinition.from_form_field(annotation, field_name, str)
    assert definition.field_caption == caption


def test_additional_information_is_an_immutable_copy():
    info = [FieldHint.PASSWORD, "extra"]
    definition = FieldDefinition.from_form_field(FormField(info=tuple(info)), "password", str)
    info.append("late")
    assert definition.additional_information == (FieldHint.PASSWORD, "extra")
    with pytest.raises(AttributeError):
        definition.identifier = "other"


def test_form_builder_filters_by_form_name():
    """Fields without forms belong to every form; undecorated fields to none."""
    login_ids = [d.identifier for d in FormBuilder(Gadget, "login").field_definitions]
    edit_ids = [d.identifier for d in FormBuilder(Gadget, "edit").field_definitions]

    assert login_ids == ["name", "count"]
    assert edit_ids == ["name", "serial", "weight", "count", "enabled", "colour"]


def test_form_builder_resolves_types_and_metadata():
    builder = FormBuilder(Gadget, "edit")

    assert builder.definition("weight").value_type is float
    assert builder.definition("serial").property_id == "serialNumber"
    assert builder.definition("serial").field_caption == "Serial no."
    assert builder.definition("name").required is True
    assert builder.definition("count").additional_information == (FieldHint.READ_ONLY, "opaque")


def test_form_builder_unknown_field():
    with pytest.raises(KeyError, match="Available fields"):
        FormBuilder(Gadget, "login").definition("serial")


def test_form_builder_rejects_non_dataclass():
    with pytest.raises(TypeError):
        FormBuilder(object, "edit")


def test_form_builder_rejects_duplicate_identifiers():
    @dataclass
    class Clash:
        a: str = form_field(default="", identifier="same")
        b: str = form_field(default="", identifier="same")

    with pytest.raises(ValueError, match="same"):
        FormBuilder(Clash, "edit")


def test_build_widgets(qapp):
    """Widgets follow declared types and hints."""
    from PyQt6.QtWidgets import QLineEdit
    from touchee.protocols import (
        CheckBoxAdapter, ComboBoxAdapter, DoubleSpinBoxAdapter, LineEditAdapter,
        SpinBoxAdapter, ValueGettable, ValueSettable,
    )

    widgets = FormBuilder(Gadget, "edit").build_widgets()

    assert list(widgets) == ["name", "serial", "weight", "count", "enabled", "colour"]
    assert isinstance(widgets["name"], LineEditAdapter)
    assert isinstance(widgets["weight"], DoubleSpinBoxAdapter)
    assert isinstance(widgets["count"], SpinBoxAdapter)
    assert isinstance(widgets["enabled"], CheckBoxAdapter)
    assert isinstance(widgets["colour"], ComboBoxAdapter)
    assert not widgets["count"].isEnabled()
    assert widgets["name"].echoMode() == QLineEdit.EchoMode.Normal
    for widget in widgets.values():
        assert isinstance(widget, ValueGettable)
        assert isinstance(widget, ValueSettable)


def test_widget_values(qapp):
    widgets = FormBuilder(Gadget, "edit").build_widgets()

    widgets["colour"].set_value(Colour.GREEN)
    assert widgets["colour"].get_value() is Colour.GREEN

    widgets["count"].set_value(7)
    assert widgets["count"].get_value() == 7
    widgets["count"].set_value(None)
    assert widgets["count"].get_value() is None

    widgets["enabled"].set_value(False)
    assert widgets["enabled"].get_value() is False

    widgets["name"].set_value("  ")
    assert widgets["name"].get_value() is None


def test_password_hint(qapp):
    from PyQt6.QtWidgets import QLineEdit
    from touchee.data import User

    widgets = FormBuilder(User, "login").build_widgets()
    assert widgets["password"].echoMode() == QLineEdit.EchoMode.Password

    widgets["password"].set_value(" secret ")
    assert widgets["password"].get_value() == " secret "
    widgets["username"].set_value(" test ")
    assert widgets["username"].get_value() == "test"


def test_unregistered_type_fails_loud(qapp):
    with pytest.raises(TypeError, match="No widget registered"):
        WidgetFactory().create_widget_for_type(bytes)


def test_custom_widget_registration(qapp):
    from touchee.protocols import LineEditAdapter

    factory = WidgetFactory({bytes: LineEditAdapter})
    assert isinstance(factory.create_widget_for_type(bytes), LineEditAdapter)


def test_package_exports_are_not_shadowed_by_submodules():
    import types

    import touchee.forms as forms

    # Resolving one export imports its submodule as a package attribute
    assert forms.FieldHint.PASSWORD.value == "password"
    assert callable(forms.form_field)
    assert not isinstance(forms.form_field, types.ModuleType)
    assert isinstance(forms.form_field(default=""), type(form_field(default="")))
