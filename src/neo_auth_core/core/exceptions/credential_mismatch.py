"""Password does not match the stored hash."""

from .base import AuthenticationFailed


class CredentialMismatch(AuthenticationFailed):
    """Raised for a wrong password and for an unreadable stored hash alike.

    Both cases produce the same message and no details so a caller cannot
    tell them apart.
    """

    def __init__(self, message: str = "invalid password") -> None:
        super().__init__(message)
