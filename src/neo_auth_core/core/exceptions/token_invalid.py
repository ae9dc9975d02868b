"""Catch-all verification failure."""

from .base import AuthCoreError


class TokenInvalid(AuthCoreError):
    """Raised for every verify-time failure.

    Bad signature, wrong algorithm family, expiry and malformed input all map
    to this one error with a fixed message and no details.
    """

    def __init__(self) -> None:
        super().__init__("invalid token")
