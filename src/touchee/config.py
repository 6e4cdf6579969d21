"""Application configuration.

Provides a single configuration object that views and the controller read
their defaults from. Applications replace it with set_touchee_config().
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ToucheeConfig:
    """Configuration for the touchee application layer.

    Attributes:
        ignoring_unregistered_actions: Whether actions without a handler are dropped silently
        login_username: Username accepted by the development login stub
        login_password: Password accepted by the development login stub
        notification_duration_ms: How long toast notifications stay visible
        window_title: Title of the main window
        list_caption: Caption of the user listing screen
        login_caption: Caption of the login screen
        sample_user_emails: E-mail addresses used to seed the user container
        log_level: Level name passed to logging.basicConfig by the entry point
    """

    ignoring_unregistered_actions: bool = True
    login_username: str = "test"
    login_password: str = "test"
    notification_duration_ms: int = 3000
    window_title: str = "Touchee"
    list_caption: str = "Listing users"
    login_caption: str = "Log in"
    sample_user_emails: List[str] = field(
        default_factory=lambda: ["foo@vaadin.com", "miki@vaadin.com", "vaadin@example.org"]
    )
    log_level: str = "INFO"


# Global config instance (set by application)
_touchee_config: Optional[ToucheeConfig] = None


def set_touchee_config(config: Optional[ToucheeConfig]) -> None:
    """Set the global configuration.

    Args:
        config: ToucheeConfig instance, or None to go back to defaults
    """
    global _touchee_config
    _touchee_config = config


def get_touchee_config() -> ToucheeConfig:
    """Get the current configuration.

    Returns:
        Current ToucheeConfig or default if not set
    """
    if _touchee_config is None:
        return ToucheeConfig()
    return _touchee_config
