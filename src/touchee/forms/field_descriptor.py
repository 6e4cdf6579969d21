"""
Declarative per-field form configuration.

A dataclass field joins a form by carrying a FormField descriptor in its
metadata. form_field() is the shorthand that builds both at once:

    @dataclass
    class User:
        username: str = form_field(default="", forms=("login", "edit"), required=True)
        password: str = form_field(default="", forms=("login",), info=(FieldHint.PASSWORD,))

Identifier and caption default to sentinels that the field definition
replaces with the field name and its capitalised form.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

FORM_FIELD_KEY = "touchee.form_field"

DEFAULT_FIELD_IDENTIFIER = "__field_name__"
DEFAULT_FIELD_CAPTION = "__default_caption__"


class FieldHint(Enum):
    """Auxiliary field metadata understood by the widget factory."""
    PASSWORD = "password"
    READ_ONLY = "read_only"


@dataclass(frozen=True)
class FormField:
    """Form configuration for one dataclass field."""
    identifier: str = DEFAULT_FIELD_IDENTIFIER
    caption: str = DEFAULT_FIELD_CAPTION
    info: Tuple[Any, ...] = ()
    forms: Tuple[str, ...] = ()
    required: bool = False

    def belongs_to(self, form_name: Optional[str]) -> bool:
        """True if the field is shown in form_name. No forms listed means every form."""
        return not self.forms or form_name is None or form_name in self.forms


def form_field(*, identifier: str = DEFAULT_FIELD_IDENTIFIER,
               caption: str = DEFAULT_FIELD_CAPTION,
               info: Tuple[Any, ...] = (),
               forms: Tuple[str, ...] = (),
               required: bool = False,
               default: Any = dataclasses.MISSING,
               default_factory: Any = dataclasses.MISSING) -> Any:
    """Create a dataclass field carrying a FormField descriptor."""
    descriptor = FormField(
        identifier=identifier,
        caption=caption,
        info=tuple(info),
        forms=tuple(forms),
        required=required,
    )
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={FORM_FIELD_KEY: descriptor},
    )


def get_form_field(dataclass_field: dataclasses.Field) -> Optional[FormField]:
    """Return the FormField attached to a dataclass field, if any."""
    return dataclass_field.metadata.get(FORM_FIELD_KEY)
