"""Signing primitive and key material failures."""

from typing import Optional

from .base import AuthCoreError


class SigningFailure(AuthCoreError):
    """Raised when a token could not be signed."""

    def __init__(
        self,
        message: str = "token signing failed",
        *,
        algorithm: Optional[str] = None,
        cause: Optional[str] = None
    ) -> None:
        details = {"algorithm": algorithm}
        if cause:
            details["cause"] = cause
        super().__init__(message, details=details)


class KeyLoadError(SigningFailure):
    """Raised at signer construction when key material cannot be parsed."""

    def __init__(self, message: str = "key material could not be loaded", *, key_type: str, cause: Optional[str] = None) -> None:
        super().__init__(message, algorithm="RS256", cause=cause)
        self.details["key_type"] = key_type
