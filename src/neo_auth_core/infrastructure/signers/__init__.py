"""JWT signer variants sharing one verification path."""

from .base import BaseJWTSigner
from .hs256_signer import HS256Signer
from .rs256_signer import RS256Signer, load_rsa_private_key, load_rsa_public_key

__all__ = [
    "BaseJWTSigner",
    "HS256Signer",
    "RS256Signer",
    "load_rsa_private_key",
    "load_rsa_public_key",
]
