"""Password hashing primitive failure."""

from typing import Optional

from .base import AuthCoreError


class HashingFailure(AuthCoreError):
    """Raised when bcrypt could not produce a hash.

    Infrastructure-level and not attacker facing, so the underlying cause is
    chained and its text is kept in ``details``.
    """

    def __init__(self, message: str = "Password hashing failed", *, cause: Optional[str] = None) -> None:
        super().__init__(message, details={"cause": cause} if cause else None)
