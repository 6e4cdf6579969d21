"""
Color scheme for touchee screens.

Centralizes the colors used for notifications and screen chrome so views
never hard-code hex strings.
"""

from dataclasses import dataclass
from typing import Tuple

from touchee.protocols.notifications import Severity


@dataclass
class ColorScheme:
    """
    Semantic colors for touchee screens.

    All colors are RGB tuples; to_hex() converts them for
    stylesheets.
    """

    # Text
    text_accent: Tuple[int, int, int] = (0, 170, 255)     # #00aaff - screen captions

    # Status
    status_info: Tuple[int, int, int] = (0, 120, 212)     # #0078d4
    status_warning: Tuple[int, int, int] = (255, 170, 0)  # #ffaa00
    status_error: Tuple[int, int, int] = (255, 85, 85)    # #ff5555
    status_text: Tuple[int, int, int] = (0, 0, 0)

    def to_hex(self, color: Tuple[int, ...]) -> str:
        """Convert an RGB tuple to #rrggbb."""
        r, g, b = color[:3]
        return f"#{r:02x}{g:02x}{b:02x}"

    def severity_color(self, severity: Severity) -> Tuple[int, int, int]:
        """Background color for a notification of the given severity."""
        return {
            Severity.INFO: self.status_info,
            Severity.WARNING: self.status_warning,
            Severity.ERROR: self.status_error,
        }[severity]

    def notification_style(self, severity: Severity) -> str:
        """Stylesheet for a notification label."""
        return (
            f"QLabel {{ background-color: {self.to_hex(self.severity_color(severity))}; "
            f"color: {self.to_hex(self.status_text)}; "
            f"border-radius: 6px; padding: 8px; }}"
        )

    def caption_style(self) -> str:
        """Stylesheet for screen captions."""
        return f"QLabel {{ color: {self.to_hex(self.text_accent)}; font-weight: bold; }}"
