"""
touchee: touch-style screens generated from dataclasses, for PyQt6.

A small application layer on top of PyQt6:

- Form generation: FormField descriptors on dataclass fields become
  FieldDefinitions, and from those, input widgets
- Action buttons: one click runs a sequence of actions, stopping at the
  first failure and reporting it as a notification
- Controller: maps actions to handlers and swaps screens (login, list,
  edit) in a single navigation stack

Architecture:
- protocols: Action/ActionHandler contract, notifications, widget ABCs
- forms: descriptors, field definitions, builder, widget factory
- widgets: action buttons
- data: bean container, User, Session
- views: navigation, screens, controller
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
