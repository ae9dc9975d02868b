"""Authentication core entities."""

from .stored_user import StoredUser

__all__ = ["StoredUser"]
