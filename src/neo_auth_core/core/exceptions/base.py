"""Base exceptions for neo-auth-core.

All errors raised by the authentication core inherit from ``AuthCoreError``
and carry an error code and a details mapping for structured logging and
API error responses.
"""

from typing import Any, Dict, Optional


class AuthCoreError(Exception):
    """Base exception for all neo-auth-core errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class AuthenticationFailed(AuthCoreError):
    """Parent of the two login failure kinds.

    Hosts that must not reveal whether a username exists catch this class
    and render a single "invalid credentials" response.
    """


class ConfigurationError(AuthCoreError):
    """Settings are incomplete or inconsistent for the requested signer."""


def mask_username(username: Optional[str]) -> str:
    """Mask a username for logs and error details."""
    if not username or len(username) <= 4:
        return "***"
    return f"{username[:2]}...{username[-2:]}"


def create_error_response(exception: AuthCoreError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-auth-core exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
