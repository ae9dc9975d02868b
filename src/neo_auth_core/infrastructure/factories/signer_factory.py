"""Token signer factory driven by ``AuthCoreSettings``."""

import logging
from pathlib import Path
from typing import Optional, Union

from ...config.settings import AuthCoreSettings, get_settings
from ...core.exceptions import ConfigurationError
from ..signers import HS256Signer, RS256Signer

logger = logging.getLogger(__name__)


def _read_pem(inline: Optional[str], path: Optional[str], name: str) -> str:
    if inline:
        return inline
    if not path:
        raise ConfigurationError(
            f"RS256 requires AUTH_JWT_{name.upper()} or AUTH_JWT_{name.upper()}_PATH",
            details={"missing": name},
        )
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read {name.replace('_', ' ')} file",
            details={"path": path, "cause": str(e)},
        ) from e


def create_token_signer(settings: Optional[AuthCoreSettings] = None) -> Union[RS256Signer, HS256Signer]:
    """Build the signer variant selected by ``jwt_algorithm``.

    Key material is read once here; rotating keys means calling this again.

    Raises:
        ConfigurationError: If required key material is missing or unreadable
        KeyLoadError: If RSA key material cannot be parsed
    """
    settings = settings or get_settings()

    if settings.uses_asymmetric_keys:
        private_pem = _read_pem(
            settings.jwt_private_key.get_secret_value() if settings.jwt_private_key else None,
            settings.jwt_private_key_path,
            "private_key",
        )
        public_pem = _read_pem(settings.jwt_public_key, settings.jwt_public_key_path, "public_key")
        return RS256Signer.from_pem(private_pem, public_pem)

    if settings.jwt_algorithm == "HS256":
        if settings.jwt_secret is None or not settings.jwt_secret.get_secret_value():
            raise ConfigurationError(
                "HS256 requires AUTH_JWT_SECRET",
                details={"missing": "jwt_secret"},
            )
        logger.info("Loaded HS256 signer")
        return HS256Signer(settings.jwt_secret.get_secret_value())

    raise ConfigurationError(
        f"Unsupported signing algorithm: {settings.jwt_algorithm}",
        details={"algorithm": settings.jwt_algorithm},
    )
