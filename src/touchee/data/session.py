"""Per-process session state."""

from dataclasses import dataclass
from typing import Optional

from .user import User


@dataclass
class Session:
    """State that lives as long as the running application.

    Attributes:
        user: Authenticated user, None until login succeeds
    """
    user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
