"""
Password hashing and verification.

Uses bcrypt with automatic salting and a fixed work factor. The hash string
is self-describing (``$2b$12$<salt><digest>``) so verification needs no
extra parameters.

bcrypt only reads 72 bytes of input, so every password is first reduced to
the base64 form of its SHA-256 digest. Passwords of any length hash without
error and two passwords sharing a 72 byte prefix still differ.
"""

import base64
import hashlib
import logging

import bcrypt

from ...config.constants import BCRYPT_ROUNDS
from ...core.exceptions import CredentialMismatch, HashingFailure

logger = logging.getLogger(__name__)


def _encode_password(plaintext: str) -> bytes:
    digest = hashlib.sha256(plaintext.encode("utf-8")).digest()
    return base64.b64encode(digest)


class BcryptPasswordHasher:
    """Stateless bcrypt implementation of the ``PasswordHasher`` protocol."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, plaintext: str) -> str:
        """Hash a password with bcrypt (auto-salted)."""
        try:
            hashed = bcrypt.hashpw(_encode_password(plaintext), bcrypt.gensalt(rounds=self._rounds))
        except (ValueError, TypeError, MemoryError) as e:
            logger.error(f"Password hashing failed: {type(e).__name__}")
            raise HashingFailure(cause=str(e)) from e
        return hashed.decode("ascii")

    def check(self, password_hash: str, plaintext: str) -> None:
        """Constant-time comparison against a bcrypt hash.

        Wrong passwords and malformed hashes raise the same error.
        """
        try:
            matched = bcrypt.checkpw(_encode_password(plaintext), password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            matched = False
        if not matched:
            raise CredentialMismatch()


_default_hasher = BcryptPasswordHasher()


def hash_password(plaintext: str) -> str:
    """Hash a password with the default work factor."""
    return _default_hasher.hash(plaintext)


def check_password_hash(password_hash: str, plaintext: str) -> None:
    """Verify a password against a stored hash, raising on mismatch."""
    _default_hasher.check(password_hash, plaintext)
