"""
Environment driven settings for the authentication core.

Only key material and algorithm selection are configurable; token lifetime
and bcrypt cost are fixed in ``constants``.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import SUPPORTED_SIGNING_ALGORITHMS


class AuthCoreSettings(BaseSettings):
    """Settings read from ``AUTH_*`` environment variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    jwt_algorithm: str = Field(default="HS256", description="RS256 or HS256")

    # Shared-secret variant
    jwt_secret: Optional[SecretStr] = Field(default=None)

    # Asymmetric variant: inline PEM takes precedence over file paths
    jwt_private_key: Optional[SecretStr] = Field(default=None)
    jwt_public_key: Optional[str] = Field(default=None)
    jwt_private_key_path: Optional[str] = Field(default=None)
    jwt_public_key_path: Optional[str] = Field(default=None)

    @field_validator("jwt_algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """Normalize and restrict the signing algorithm."""
        algorithm = v.strip().upper()
        if algorithm not in SUPPORTED_SIGNING_ALGORITHMS:
            raise ValueError(
                f"jwt_algorithm must be one of {', '.join(SUPPORTED_SIGNING_ALGORITHMS)}"
            )
        return algorithm

    @property
    def uses_asymmetric_keys(self) -> bool:
        return self.jwt_algorithm == "RS256"


@lru_cache()
def get_settings() -> AuthCoreSettings:
    """Get cached settings instance."""
    return AuthCoreSettings()
