"""Repository lookup miss."""

from typing import Optional

from .base import AuthenticationFailed, mask_username


class UserNotFound(AuthenticationFailed):
    """Raised by a ``UserRepository`` when no user has the given username."""

    def __init__(self, message: str = "user not found", *, username: Optional[str] = None) -> None:
        super().__init__(message, details={"username": mask_username(username)})
