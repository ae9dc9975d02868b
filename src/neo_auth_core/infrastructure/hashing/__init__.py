"""Password hashing adapters."""

from .bcrypt_hasher import BcryptPasswordHasher, check_password_hash, hash_password

__all__ = ["BcryptPasswordHasher", "check_password_hash", "hash_password"]
