"""Authentication core protocols.

Contract definitions for the collaborators ``AuthService`` is composed from.
Each protocol defines exactly one capability.
"""

from .auth_user import AuthUser
from .claims_customizer import ClaimsCustomizer
from .password_hasher import PasswordHasher
from .token_signer import TokenSigner
from .user_repository import UserRepository

__all__ = [
    "AuthUser",
    "ClaimsCustomizer",
    "PasswordHasher",
    "TokenSigner",
    "UserRepository",
]
