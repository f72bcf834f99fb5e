"""Tests for zkdrop/infrastructure/security/credential_derivation.py.

Verifies the two derived secrets: digest widths, feed order, username
case-insensitivity, and that the two outputs are unrelated.
"""

import base64
import hashlib

import pytest

from zkdrop.core.constants import AUTHENTICATION_SECRET_BYTES, SYMMETRIC_KEY_SEED_BYTES
from zkdrop.domain.value_objects import AuthenticationPassword, Password, Username
from zkdrop.infrastructure.security.credential_derivation import (
    derive_authentication_password,
    derive_symmetric_key,
    to_authentication_password,
)


@pytest.mark.unit
class TestDeriveAuthenticationPassword:
    """Tests for the server-facing secret."""

    def test_returns_64_bytes(self) -> None:
        secret = derive_authentication_password(Username("alice"), Password("secret1"))
        assert len(secret) == AUTHENTICATION_SECRET_BYTES == 64

    def test_hashes_password_then_lowercased_username(self) -> None:
        expected = hashlib.sha512(b"secret1alice").digest()
        assert derive_authentication_password(Username("Alice"), Password("secret1")) == expected

    def test_username_case_does_not_matter(self) -> None:
        """'Alice' and 'alice' log in with the same secret."""
        upper = derive_authentication_password(Username("Alice"), Password("secret1"))
        lower = derive_authentication_password(Username("alice"), Password("secret1"))
        assert upper == lower

    def test_password_case_matters(self) -> None:
        a = derive_authentication_password(Username("alice"), Password("secret1"))
        b = derive_authentication_password(Username("alice"), Password("Secret1"))
        assert a != b

    def test_changes_with_password(self) -> None:
        a = derive_authentication_password(Username("alice"), Password("secret1"))
        b = derive_authentication_password(Username("alice"), Password("secret2"))
        assert a != b

    def test_is_deterministic(self) -> None:
        a = derive_authentication_password(Username("bob"), Password("hunter2"))
        b = derive_authentication_password(Username("bob"), Password("hunter2"))
        assert a == b

    def test_encodes_non_ascii_password_as_utf8(self) -> None:
        expected = hashlib.sha512("pässwörd".encode("utf-8") + b"alice").digest()
        assert derive_authentication_password(Username("alice"), Password("pässwörd")) == expected


@pytest.mark.unit
class TestDeriveSymmetricKey:
    """Tests for the client-only key seed."""

    def test_returns_32_bytes(self) -> None:
        key = derive_symmetric_key(Username("alice"), Password("secret1"))
        assert len(key) == SYMMETRIC_KEY_SEED_BYTES == 32

    def test_hashes_lowercased_username_then_password(self) -> None:
        expected = hashlib.sha256(b"alicesecret1").digest()
        assert derive_symmetric_key(Username("ALICE"), Password("secret1")) == expected

    def test_username_case_does_not_matter(self) -> None:
        upper = derive_symmetric_key(Username("Alice"), Password("secret1"))
        lower = derive_symmetric_key(Username("alice"), Password("secret1"))
        assert upper == lower

    def test_changes_with_password(self) -> None:
        a = derive_symmetric_key(Username("alice"), Password("secret1"))
        b = derive_symmetric_key(Username("alice"), Password("secret2"))
        assert a != b


@pytest.mark.unit
class TestDerivedSecretsAreIndependent:
    """The server-visible secret must not reveal the key seed."""

    def test_key_is_not_a_prefix_of_authentication_secret(self) -> None:
        username, password = Username("alice"), Password("secret1")
        secret = derive_authentication_password(username, password)
        key = derive_symmetric_key(username, password)
        assert secret[:32] != key

    def test_feed_order_differs_between_digests(self) -> None:
        """Swapping the feed order changes the digest."""
        username, password = Username("alice"), Password("secret1")
        assert derive_symmetric_key(username, password) != hashlib.sha256(b"secret1alice").digest()
        assert derive_authentication_password(username, password) != hashlib.sha512(b"alicesecret1").digest()


@pytest.mark.unit
class TestToAuthenticationPassword:
    """Tests for the transmittable form of the secret."""

    def test_returns_authentication_password(self) -> None:
        secret = derive_authentication_password(Username("alice"), Password("secret1"))
        result = to_authentication_password(secret)
        assert isinstance(result, AuthenticationPassword)

    def test_value_is_base64_of_secret(self) -> None:
        secret = derive_authentication_password(Username("alice"), Password("secret1"))
        result = to_authentication_password(secret)
        assert base64.b64decode(result.value) == secret
        assert len(result.value) == 88
