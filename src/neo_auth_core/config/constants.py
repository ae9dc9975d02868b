"""Fixed policy constants for the authentication core.

These values are part of the token and credential contract and are
not read from settings.
"""

from datetime import timedelta
from enum import Enum
from typing import Final


# Password hashing
BCRYPT_ROUNDS: Final[int] = 12

# Token lifetime applied by every signer at sign time
TOKEN_LIFETIME: Final[timedelta] = timedelta(hours=72)


class ClaimName(str, Enum):
    """Claim keys managed by the core."""
    SUBJECT = "sub"
    USERNAME = "username"
    EXPIRATION = "exp"


class AlgorithmFamily(str, Enum):
    """Signing scheme classes a verifier may be configured for."""
    RSA = "RSA"
    HMAC = "HMAC"


ALGORITHM_FAMILIES = {
    AlgorithmFamily.RSA: frozenset({"RS256", "RS384", "RS512"}),
    AlgorithmFamily.HMAC: frozenset({"HS256", "HS384", "HS512"}),
}

SUPPORTED_SIGNING_ALGORITHMS = ("RS256", "HS256")
