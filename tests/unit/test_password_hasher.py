"""Tests for bcrypt password hashing."""

import pytest

from neo_auth_core import (
    BCRYPT_ROUNDS,
    BcryptPasswordHasher,
    CredentialMismatch,
    HashingFailure,
    check_password_hash,
    hash_password,
)


class TestHashPassword:
    """Test cases for hash_password."""

    def test_hash_is_bcrypt_with_fixed_work_factor(self):
        hashed = hash_password("secret1")

        assert hashed.startswith(f"$2b${BCRYPT_ROUNDS:02d}$")
        assert hashed != "secret1"

    def test_hash_is_salted(self, fast_hasher):
        assert fast_hasher.hash("secret1") != fast_hasher.hash("secret1")

    def test_empty_password_can_be_hashed(self, fast_hasher):
        hashed = fast_hasher.hash("")

        fast_hasher.check(hashed, "")

    def test_long_password_is_not_rejected(self, fast_hasher):
        password = "p" * 200

        hashed = fast_hasher.hash(password)

        fast_hasher.check(hashed, password)

    def test_passwords_sharing_a_72_byte_prefix_differ(self, fast_hasher):
        hashed = fast_hasher.hash("a" * 72 + "Y")

        fast_hasher.check(hashed, "a" * 72 + "Y")
        with pytest.raises(CredentialMismatch):
            fast_hasher.check(hashed, "a" * 72 + "X")
        with pytest.raises(CredentialMismatch):
            fast_hasher.check(hashed, "a" * 72)

    def test_primitive_failure_raises_hashing_failure(self, fast_hasher, mocker):
        mocker.patch(
            "neo_auth_core.infrastructure.hashing.bcrypt_hasher.bcrypt.hashpw",
            side_effect=ValueError("boom"),
        )

        with pytest.raises(HashingFailure) as exc_info:
            fast_hasher.hash("secret1")

        assert exc_info.value.details["cause"] == "boom"
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestCheckPasswordHash:
    """Test cases for check_password_hash."""

    def test_matching_password_passes(self):
        hashed = hash_password("secret1")

        assert check_password_hash(hashed, "secret1") is None

    @pytest.mark.parametrize("candidate", ["wrong", "Secret1", "secret1 ", ""])
    def test_different_password_fails(self, fast_hasher, candidate):
        hashed = fast_hasher.hash("secret1")

        with pytest.raises(CredentialMismatch):
            fast_hasher.check(hashed, candidate)

    def test_unicode_password_round_trip(self, fast_hasher):
        hashed = fast_hasher.hash("pässwörd-密码")

        fast_hasher.check(hashed, "pässwörd-密码")
        with pytest.raises(CredentialMismatch):
            fast_hasher.check(hashed, "passwort-密码")

    @pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$12$short"])
    def test_malformed_hash_looks_like_mismatch(self, fast_hasher, bad_hash):
        with pytest.raises(CredentialMismatch) as malformed:
            fast_hasher.check(bad_hash, "secret1")
        with pytest.raises(CredentialMismatch) as mismatch:
            fast_hasher.check(fast_hasher.hash("other"), "secret1")

        assert str(malformed.value) == str(mismatch.value)
        assert malformed.value.details == mismatch.value.details == {}

    def test_verifies_hashes_from_other_work_factors(self):
        hashed = BcryptPasswordHasher(rounds=5).hash("secret1")

        BcryptPasswordHasher().check(hashed, "secret1")
