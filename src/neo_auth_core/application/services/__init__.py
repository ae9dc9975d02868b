"""Application services."""

from .auth_service import AuthService

__all__ = ["AuthService"]
