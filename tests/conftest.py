"""Pytest configuration and fixtures for neo-auth-core tests."""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from neo_auth_core import (
    AuthService,
    BcryptPasswordHasher,
    HS256Signer,
    InMemoryUserRepository,
    RS256Signer,
)


def _generate_rsa_pem_pair():
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return private_pem, public_pem


@pytest.fixture(scope="session")
def rsa_pem_pair():
    """PEM encoded (private, public) RSA key pair shared by the session."""
    return _generate_rsa_pem_pair()


@pytest.fixture(scope="session")
def other_rsa_pem_pair():
    """A second, unrelated RSA key pair."""
    return _generate_rsa_pem_pair()


@pytest.fixture
def hmac_secret():
    """Sample HMAC secret (32 bytes)."""
    return b"neo-auth-core-test-secret-0123456789"


@pytest.fixture
def rs256_signer(rsa_pem_pair):
    private_pem, public_pem = rsa_pem_pair
    return RS256Signer.from_pem(private_pem, public_pem)


@pytest.fixture
def hs256_signer(hmac_secret):
    return HS256Signer(hmac_secret)


@pytest.fixture(params=["rs256", "hs256"])
def any_signer(request, rs256_signer, hs256_signer):
    """Each signer variant in turn."""
    return rs256_signer if request.param == "rs256" else hs256_signer


@pytest.fixture
def fast_hasher():
    """Bcrypt hasher with minimum cost to keep service tests quick."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def auth_service(user_repository, hs256_signer, fast_hasher):
    """Auth service over in-memory storage and an HS256 signer."""
    return AuthService(user_repository, hs256_signer, hasher=fast_hasher)
