"""Configuration for neo-auth-core: fixed constants, settings and logging."""

from .constants import (
    ALGORITHM_FAMILIES,
    BCRYPT_ROUNDS,
    SUPPORTED_SIGNING_ALGORITHMS,
    TOKEN_LIFETIME,
    AlgorithmFamily,
    ClaimName,
)
from .logging_config import LoggingConfig, setup_logging
from .settings import AuthCoreSettings, get_settings

__all__ = [
    "ALGORITHM_FAMILIES",
    "BCRYPT_ROUNDS",
    "SUPPORTED_SIGNING_ALGORITHMS",
    "TOKEN_LIFETIME",
    "AlgorithmFamily",
    "ClaimName",
    "LoggingConfig",
    "setup_logging",
    "AuthCoreSettings",
    "get_settings",
]
