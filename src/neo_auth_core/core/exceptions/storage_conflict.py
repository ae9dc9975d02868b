"""Repository write failure."""

from typing import Optional

from .base import AuthCoreError, mask_username


class StorageConflict(AuthCoreError):
    """Raised by a ``UserRepository`` when a user cannot be created.

    Covers duplicate usernames as well as other storage errors; ``reason``
    distinguishes them for logging.
    """

    def __init__(
        self,
        message: str = "user could not be created",
        *,
        username: Optional[str] = None,
        reason: str = "storage_error"
    ) -> None:
        super().__init__(
            message,
            details={"username": mask_username(username), "reason": reason},
        )

    @classmethod
    def duplicate_username(cls, username: str) -> "StorageConflict":
        """Create exception for an already registered username."""
        return cls("username already exists", username=username, reason="duplicate_username")
