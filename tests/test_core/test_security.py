"""Tests for password hashing and access tokens."""

import pytest
from hypothesis import given, settings as hypothesis_settings, strategies as st

from autoflow.core.security import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from autoflow.models.user import User, UserRole

passwords = st.text(
    alphabet=st.characters(min_codepoint=33, max_codepoint=126),
    min_size=1,
    max_size=64,
)


class TestPasswordHashing:
    """Tests for bcrypt helpers."""

    @hypothesis_settings(max_examples=15, deadline=None)
    @given(password=passwords)
    def test_hash_verifies(self, password: str):
        """Any password verifies against its own hash."""
        hashed = hash_password(password)

        assert hashed != password
        assert verify_password(password, hashed)

    @hypothesis_settings(max_examples=15, deadline=None)
    @given(password=passwords, other=passwords)
    def test_different_password_rejected(self, password: str, other: str):
        if password == other:
            return
        assert not verify_password(other, hash_password(password))

    def test_hashes_are_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_malformed_hash_is_rejected(self):
        assert verify_password("secret", "not-a-bcrypt-hash") is False


class TestAccessTokens:
    """Tests for JWT issue and validation."""

    def test_roundtrip_claims(self):
        user = User(
            email="admin@example.com",
            name="Admin",
            hashed_password="x",
            role=UserRole.ADMIN,
        )

        payload = decode_access_token(create_access_token(user))

        assert payload.sub == user.id
        assert payload.email == "admin@example.com"
        assert payload.role is UserRole.ADMIN

    def test_tampered_token_rejected(self):
        user = User(email="a@example.com", name="A", hashed_password="x")
        token = create_access_token(user)
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"

        with pytest.raises(InvalidTokenError):
            decode_access_token(tampered)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidTokenError):
            decode_access_token("garbage")
