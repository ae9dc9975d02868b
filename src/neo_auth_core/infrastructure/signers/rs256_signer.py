"""RSA key pair signer."""

import logging
from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from ...config.constants import AlgorithmFamily
from ...core.exceptions import KeyLoadError
from .base import BaseJWTSigner

logger = logging.getLogger(__name__)

PemData = Union[str, bytes]


def _as_bytes(pem: PemData) -> bytes:
    return pem.encode("utf-8") if isinstance(pem, str) else pem


def load_rsa_private_key(private_key_pem: PemData) -> RSAPrivateKey:
    """Parse an unencrypted PEM RSA private key.

    Raises:
        KeyLoadError: If the PEM is unreadable or not an RSA key
    """
    try:
        key = serialization.load_pem_private_key(_as_bytes(private_key_pem), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyLoadError(key_type="private", cause=str(e)) from e
    if not isinstance(key, RSAPrivateKey):
        raise KeyLoadError("private key is not an RSA key", key_type="private")
    return key


def load_rsa_public_key(public_key_pem: PemData) -> RSAPublicKey:
    """Parse a PEM RSA public key.

    Raises:
        KeyLoadError: If the PEM is unreadable or not an RSA key
    """
    try:
        key = serialization.load_pem_public_key(_as_bytes(public_key_pem))
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyLoadError(key_type="public", cause=str(e)) from e
    if not isinstance(key, RSAPublicKey):
        raise KeyLoadError("public key is not an RSA key", key_type="public")
    return key


class RS256Signer(BaseJWTSigner):
    """Signs with an RSA private key and verifies with the public key.

    Only RS256/RS384/RS512 headers are accepted on verify, which blocks
    tokens that try to pass the public key off as an HMAC secret.
    """

    algorithm_family = AlgorithmFamily.RSA

    def __init__(self, private_key: RSAPrivateKey, public_key: RSAPublicKey):
        super().__init__("RS256")
        self._private_key = private_key
        self._public_key = public_key

    @classmethod
    def from_pem(cls, private_key_pem: PemData, public_key_pem: PemData) -> "RS256Signer":
        """Build a signer from PEM encoded keys, failing fast on bad input."""
        private_key = load_rsa_private_key(private_key_pem)
        public_key = load_rsa_public_key(public_key_pem)
        logger.info(f"Loaded RS256 signer ({private_key.key_size}-bit key)")
        return cls(private_key, public_key)

    def _signing_key(self) -> RSAPrivateKey:
        return self._private_key

    def _verification_key(self) -> RSAPublicKey:
        return self._public_key
