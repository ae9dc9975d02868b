"""Factories assembling infrastructure from settings."""

from .signer_factory import create_token_signer

__all__ = ["create_token_signer"]
