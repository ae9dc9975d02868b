"""Neo-Auth-Core - password and JWT authentication core for NeoMultiTenant services.

Composes a user repository, a bcrypt password hasher, an optional claims
customizer and an RS256 or HS256 token signer into three operations:
signup, login and token verification.

Usage:
    from neo_auth_core import AuthService, HS256Signer, InMemoryUserRepository

    service = AuthService(InMemoryUserRepository(), HS256Signer(secret))
    service.signup("alice", "secret1")
    token = service.login("alice", "secret1")
    claims = service.verify_token(token)
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    AuthCoreSettings,
    get_settings,
    TOKEN_LIFETIME,
    BCRYPT_ROUNDS,
)

from .core.exceptions import (
    AuthCoreError,
    AuthenticationFailed,
    ConfigurationError,
    CredentialMismatch,
    CustomizerRejected,
    HashingFailure,
    KeyLoadError,
    SigningFailure,
    StorageConflict,
    TokenInvalid,
    UserNotFound,
    create_error_response,
)

from .core.protocols import (
    AuthUser,
    ClaimsCustomizer,
    PasswordHasher,
    TokenSigner,
    UserRepository,
)

from .core.entities import StoredUser

from .infrastructure.hashing import (
    BcryptPasswordHasher,
    hash_password,
    check_password_hash,
)

from .infrastructure.signers import (
    BaseJWTSigner,
    RS256Signer,
    HS256Signer,
)

from .infrastructure.repositories import InMemoryUserRepository
from .infrastructure.factories import create_token_signer

from .application.services import AuthService

__all__ = [
    "__version__",

    # Configuration
    "AuthCoreSettings",
    "get_settings",
    "TOKEN_LIFETIME",
    "BCRYPT_ROUNDS",

    # Exceptions
    "AuthCoreError",
    "AuthenticationFailed",
    "ConfigurationError",
    "CredentialMismatch",
    "CustomizerRejected",
    "HashingFailure",
    "KeyLoadError",
    "SigningFailure",
    "StorageConflict",
    "TokenInvalid",
    "UserNotFound",
    "create_error_response",

    # Protocols
    "AuthUser",
    "ClaimsCustomizer",
    "PasswordHasher",
    "TokenSigner",
    "UserRepository",

    # Entities
    "StoredUser",

    # Infrastructure
    "BcryptPasswordHasher",
    "hash_password",
    "check_password_hash",
    "BaseJWTSigner",
    "RS256Signer",
    "HS256Signer",
    "InMemoryUserRepository",
    "create_token_signer",

    # Services
    "AuthService",
]
