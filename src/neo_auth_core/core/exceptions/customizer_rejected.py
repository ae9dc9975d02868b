"""Claims customizer aborted a login."""

from typing import Optional

from .base import AuthCoreError


class CustomizerRejected(AuthCoreError):
    """Raised when the host claims customizer fails; no token is issued.

    Customizers may raise this directly. Any other exception they raise is
    wrapped into it by ``AuthService.login`` with the original chained.
    """

    def __init__(self, message: str = "claims customizer rejected login", *, cause: Optional[str] = None) -> None:
        super().__init__(message, details={"cause": cause} if cause else None)
