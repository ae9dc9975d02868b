"""User storage capability contract."""

from typing import Protocol, runtime_checkable

from .auth_user import AuthUser


@runtime_checkable
class UserRepository(Protocol):
    """Storage operations the core needs from the host application.

    Implementations own persistence entirely; the core imposes no schema.
    """

    def find_by_username(self, username: str) -> AuthUser:
        """Look up a user by login name.

        Raises:
            UserNotFound: If no user has this username
        """
        ...

    def create_user(self, username: str, password_hash: str) -> AuthUser:
        """Persist a new user with an already computed password hash.

        Raises:
            StorageConflict: If the username is taken or the write fails
        """
        ...
