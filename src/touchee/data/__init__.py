"""
Data layer.

In-memory bean container backing the views, the User record and the session
state.
"""

from .bean_container import BeanItem, BeanItemContainer
from .session import Session
from .user import User

__all__ = [
    "BeanItem",
    "BeanItemContainer",
    "Session",
    "User",
]
