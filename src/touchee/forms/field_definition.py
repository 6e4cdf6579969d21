"""Immutable field definitions built from FormField descriptors."""

from dataclasses import dataclass
from typing import Any, Tuple, Type

from .field_descriptor import FormField, DEFAULT_FIELD_IDENTIFIER, DEFAULT_FIELD_CAPTION


def default_caption(field_name: str) -> str:
    """Field name with only its first character upper-cased."""
    return field_name[:1].upper() + field_name[1:]


@dataclass(frozen=True)
class FieldDefinition:
    """
    Description of one form field.

    Values are copied out of the FormField descriptor, so the descriptor is
    not needed once the definition exists.
    """
    identifier: str
    property_id: str
    value_type: Type
    field_caption: str
    additional_information: Tuple[Any, ...] = ()
    required: bool = False

    @classmethod
    def from_form_field(cls, annotation: FormField, field_name: str, value_type: Type) -> "FieldDefinition":
        """
        Build a definition for field_name from its descriptor.

        Args:
            annotation: FormField attached to the field
            field_name: Name of the dataclass field, used as property id
            value_type: Declared type of the field

        Returns:
            FieldDefinition with sentinel identifier/caption resolved
        """
        if annotation.identifier == DEFAULT_FIELD_IDENTIFIER:
            identifier = field_name
        else:
            identifier = annotation.identifier

        # default caption means field name upper-cased
        if annotation.caption == DEFAULT_FIELD_CAPTION:
            caption = default_caption(field_name)
        else:
            caption = annotation.caption

        return cls(
            identifier=identifier,
            property_id=field_name,
            value_type=value_type,
            field_caption=caption,
            additional_information=tuple(annotation.info),
            required=annotation.required,
        )

    def has_hint(self, hint: Any) -> bool:
        return hint in self.additional_information
