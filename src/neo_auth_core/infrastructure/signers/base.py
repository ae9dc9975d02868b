"""Shared JWT signing and verification.

Both signer variants go through ``BaseJWTSigner`` so the algorithm family
check in ``verify`` exists exactly once.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Mapping

import jwt
from jwt.exceptions import PyJWTError

from ...config.constants import ALGORITHM_FAMILIES, TOKEN_LIFETIME, AlgorithmFamily, ClaimName
from ...core.exceptions import SigningFailure, TokenInvalid

logger = logging.getLogger(__name__)


class BaseJWTSigner(ABC):
    """Template for family-restricted JWT signers.

    Subclasses provide the algorithm, its family and the two keys. ``sign``
    always overlays a fresh ``exp``; ``verify`` rejects any header algorithm
    outside the family before the verification key is used.
    """

    algorithm_family: AlgorithmFamily

    def __init__(self, algorithm: str):
        if algorithm not in self.allowed_algorithms:
            raise ValueError(
                f"Algorithm {algorithm} is not in the {self.algorithm_family.value} family"
            )
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def allowed_algorithms(self) -> FrozenSet[str]:
        return ALGORITHM_FAMILIES[self.algorithm_family]

    @abstractmethod
    def _signing_key(self) -> Any:
        """Key passed to ``jwt.encode``."""

    @abstractmethod
    def _verification_key(self) -> Any:
        """Key passed to ``jwt.decode``."""

    def build_payload(self, claims: Mapping[str, Any], issued_at: datetime) -> Dict[str, Any]:
        """Copy caller claims and stamp the expiration.

        A caller supplied ``exp`` is overwritten.
        """
        payload = dict(claims)
        payload[ClaimName.EXPIRATION.value] = int((issued_at + TOKEN_LIFETIME).timestamp())
        return payload

    def sign(self, claims: Mapping[str, Any]) -> str:
        """Sign claims with a fresh 72 hour expiration."""
        payload = self.build_payload(claims, datetime.now(timezone.utc))
        try:
            token = jwt.encode(payload, self._signing_key(), algorithm=self._algorithm)
        except (PyJWTError, TypeError, ValueError) as e:
            logger.error(f"Failed to sign token with {self._algorithm}: {type(e).__name__}")
            raise SigningFailure(algorithm=self._algorithm, cause=str(e)) from e
        logger.debug(f"Signed token with {self._algorithm}")
        return token

    def verify(self, token: str) -> Dict[str, Any]:
        """Verify algorithm family, signature and expiration.

        Returns:
            Decoded claims

        Raises:
            TokenInvalid: For every kind of failure
        """
        if not isinstance(token, str) or not token:
            logger.debug("Token rejected: empty or not a string")
            raise TokenInvalid()

        try:
            header = jwt.get_unverified_header(token)
        except PyJWTError as e:
            logger.debug(f"Token rejected: unreadable header ({type(e).__name__})")
            raise TokenInvalid() from None

        header_algorithm = header.get("alg")
        if not isinstance(header_algorithm, str) or header_algorithm not in self.allowed_algorithms:
            logger.debug(
                f"Token rejected: algorithm {header_algorithm!r} outside "
                f"{self.algorithm_family.value} family"
            )
            raise TokenInvalid()

        try:
            claims = jwt.decode(
                token,
                key=self._verification_key(),
                algorithms=sorted(self.allowed_algorithms),
                options={
                    "require": [ClaimName.EXPIRATION.value],
                    "verify_aud": False,
                },
            )
        except (PyJWTError, ValueError, TypeError) as e:
            logger.debug(f"Token rejected: {type(e).__name__}")
            raise TokenInvalid() from None

        return claims

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(algorithm={self._algorithm!r})"
