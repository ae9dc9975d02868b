"""Shared secret signer."""

from typing import Union

from ...config.constants import AlgorithmFamily
from .base import BaseJWTSigner


class HS256Signer(BaseJWTSigner):
    """Signs and verifies with one HMAC secret.

    The secret is opaque; only HS256/HS384/HS512 headers are accepted on
    verify.
    """

    algorithm_family = AlgorithmFamily.HMAC

    def __init__(self, secret: Union[str, bytes]):
        super().__init__("HS256")
        self._secret = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)

    def _signing_key(self) -> bytes:
        return self._secret

    def _verification_key(self) -> bytes:
        return self._secret
