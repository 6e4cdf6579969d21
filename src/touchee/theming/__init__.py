"""Theming for touchee screens."""

from .color_scheme import ColorScheme

__all__ = [
    "ColorScheme",
]
