"""Authenticated user capability contract."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AuthUser(Protocol):
    """Minimal read-only shape a host user model must expose.

    The core only reads these three attributes; it never constructs or
    mutates a user.
    """

    @property
    def id(self) -> str:
        """Stable identity, used as the ``sub`` claim."""
        ...

    @property
    def username(self) -> str:
        """Login name."""
        ...

    @property
    def password_hash(self) -> str:
        """Opaque hash produced by the password hasher."""
        ...
