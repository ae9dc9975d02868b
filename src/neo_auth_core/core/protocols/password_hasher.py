"""Password hashing capability contract."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PasswordHasher(Protocol):
    """One-way credential transform and its verification."""

    def hash(self, plaintext: str) -> str:
        """Return a self-describing salted hash.

        Raises:
            HashingFailure: If the primitive fails
        """
        ...

    def check(self, password_hash: str, plaintext: str) -> None:
        """Return normally on a match.

        Raises:
            CredentialMismatch: On a wrong password or a malformed hash
        """
        ...
