"""Authentication service composing hasher, repository, customizer and signer."""

import logging
from typing import Any, Dict, Optional

from ...config.constants import ClaimName
from ...core.exceptions import CredentialMismatch, CustomizerRejected, mask_username
from ...core.protocols import (
    AuthUser,
    ClaimsCustomizer,
    PasswordHasher,
    TokenSigner,
    UserRepository,
)
from ...infrastructure.hashing import BcryptPasswordHasher

logger = logging.getLogger(__name__)


class AuthService:
    """Signup, login and token verification over injected collaborators.

    Handles ONLY the orchestration of the three flows. Storage, signing
    algorithm and claim enrichment are supplied by the host and fixed at
    construction; the service itself keeps no other state and is safe to
    share between threads.
    """

    def __init__(
        self,
        repository: UserRepository,
        signer: TokenSigner,
        claims_customizer: Optional[ClaimsCustomizer] = None,
        hasher: Optional[PasswordHasher] = None
    ):
        """Initialize service with protocol dependencies.

        Args:
            repository: Host user storage
            signer: Token signer variant (RS256 or HS256)
            claims_customizer: Optional hook enriching claims before signing
            hasher: Password hasher, bcrypt with 12 rounds when omitted
        """
        self._repository = repository
        self._signer = signer
        self._claims_customizer = claims_customizer
        self._hasher = hasher or BcryptPasswordHasher()

    @property
    def repository(self) -> UserRepository:
        return self._repository

    @property
    def signer(self) -> TokenSigner:
        return self._signer

    @property
    def claims_customizer(self) -> Optional[ClaimsCustomizer]:
        return self._claims_customizer

    def signup(self, username: str, password: str) -> AuthUser:
        """Register a new user.

        Args:
            username: Login name
            password: Plaintext password, never stored

        Returns:
            The user created by the repository

        Raises:
            HashingFailure: If hashing fails; storage is not touched
            StorageConflict: Propagated from the repository (e.g. duplicate username)
        """
        password_hash = self._hasher.hash(password)
        user = self._repository.create_user(username, password_hash)
        logger.info(f"Registered user {mask_username(username)}")
        return user

    def login(self, username: str, password: str) -> str:
        """Authenticate credentials and issue a signed token.

        Args:
            username: Login name
            password: Plaintext password

        Returns:
            Signed compact token

        Raises:
            UserNotFound: Propagated from the repository lookup
            CredentialMismatch: If the password does not match the stored hash
            CustomizerRejected: If the claims customizer fails
            SigningFailure: If the signer fails
        """
        # Step 1: Look up the user; lookup errors surface unchanged
        user = self._repository.find_by_username(username)

        # Step 2: Check the password; every check failure is a mismatch
        try:
            self._hasher.check(user.password_hash, password)
        except Exception:
            logger.info(f"Login failed for {mask_username(username)}: invalid password")
            raise CredentialMismatch() from None

        # Step 3: Assemble required claims
        claims: Dict[str, Any] = {
            ClaimName.SUBJECT.value: str(user.id),
            ClaimName.USERNAME.value: user.username,
        }

        # Step 4: Let the host enrich them
        if self._claims_customizer is not None:
            self._apply_customizer(user, claims)

        # Step 5: Sign
        token = self._signer.sign(claims)
        logger.info(f"Issued token for {mask_username(username)}")
        return token

    def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify a token and return its claims.

        Raises:
            TokenInvalid: For any verification failure
        """
        return self._signer.verify(token)

    def _apply_customizer(self, user: AuthUser, claims: Dict[str, Any]) -> None:
        try:
            self._claims_customizer(user, claims)
        except CustomizerRejected:
            logger.warning(f"Claims customizer rejected login for {mask_username(user.username)}")
            raise
        except Exception as e:
            logger.warning(
                f"Claims customizer failed for {mask_username(user.username)}: {type(e).__name__}"
            )
            raise CustomizerRejected(cause=str(e)) from e
