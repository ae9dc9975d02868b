"""Authentication core exceptions.

One module per failure kind. ``AuthenticationFailed`` groups the two login
failures so hosts can collapse them into one external response.
"""

from .base import (
    AuthCoreError,
    AuthenticationFailed,
    ConfigurationError,
    create_error_response,
    mask_username,
)
from .credential_mismatch import CredentialMismatch
from .customizer_rejected import CustomizerRejected
from .hashing_failure import HashingFailure
from .signing_failure import KeyLoadError, SigningFailure
from .storage_conflict import StorageConflict
from .token_invalid import TokenInvalid
from .user_not_found import UserNotFound

__all__ = [
    "AuthCoreError",
    "AuthenticationFailed",
    "ConfigurationError",
    "create_error_response",
    "mask_username",
    "CredentialMismatch",
    "CustomizerRejected",
    "HashingFailure",
    "KeyLoadError",
    "SigningFailure",
    "StorageConflict",
    "TokenInvalid",
    "UserNotFound",
]
