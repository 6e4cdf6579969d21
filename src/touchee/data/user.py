"""User record edited by the sample application."""

from dataclasses import dataclass

from touchee.forms.field_descriptor import FieldHint, form_field


@dataclass
class User:
    """A user with login credentials and a contact address."""
    username: str = form_field(default="", forms=("login", "edit"), required=True)
    email: str = form_field(default="", caption="E-mail", forms=("edit",))
    password: str = form_field(default="", forms=("login",), info=(FieldHint.PASSWORD,))

    @classmethod
    def from_email(cls, email: str) -> "User":
        """Create a user whose username is the local part of email."""
        username, _, domain = email.partition("@")
        return cls(username=username, email=f"{username}@{domain}")
