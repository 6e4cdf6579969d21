"""
Action widgets.

Buttons that delegate their clicks to an ActionHandler as a sequence of
actions.
"""

from .action_button import ActionButton, SequenceActionButton

__all__ = [
    "ActionButton",
    "SequenceActionButton",
]
