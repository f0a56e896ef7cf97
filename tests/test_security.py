"""
Unit tests for password hashing, token signing and the access policy.
"""

import asyncio
from datetime import timedelta

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import JWTError

from app.core.config import Settings
from app.core.deps import get_current_principal, require_role
from app.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from app.schemas.user_info import Principal


class TestPasswordHashing:

    def test_hash_is_not_plaintext(self):
        hashed = get_password_hash("Secret123!")

        assert hashed != "Secret123!"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert get_password_hash("Secret123!") != get_password_hash("Secret123!")

    def test_verify(self):
        hashed = get_password_hash("Secret123!")

        assert verify_password("Secret123!", hashed) is True
        assert verify_password("secret123!", hashed) is False

    def test_long_password_truncated_consistently(self):
        long_password = "a" * 100
        hashed = get_password_hash(long_password)

        assert verify_password(long_password, hashed)
        assert verify_password("a" * 72, hashed)


class TestTokens:

    def test_round_trip_claims(self, test_settings):
        token = create_access_token(test_settings, 7, "seven@example.com", "Admin")

        claims = decode_access_token(token, test_settings)

        assert claims["id"] == "7"
        assert claims["email"] == "seven@example.com"
        assert claims["role"] == "Admin"
        assert claims["iss"] == test_settings.JWT_ISSUER
        assert claims["aud"] == test_settings.JWT_AUDIENCE

    def test_expired_token_rejected(self, test_settings):
        token = create_access_token(
            test_settings, 1, "old@example.com", "User", expires_delta=timedelta(seconds=-10)
        )

        with pytest.raises(JWTError):
            decode_access_token(token, test_settings)

    def test_wrong_audience_rejected(self, test_settings):
        other = Settings(
            JWT_ISSUER=test_settings.JWT_ISSUER,
            JWT_AUDIENCE="someone-else",
            JWT_SECRET_KEY=test_settings.JWT_SECRET_KEY,
        )
        token = create_access_token(other, 1, "a@example.com", "User")

        with pytest.raises(JWTError):
            decode_access_token(token, test_settings)

    def test_wrong_key_rejected(self, test_settings):
        other = Settings(
            JWT_ISSUER=test_settings.JWT_ISSUER,
            JWT_AUDIENCE=test_settings.JWT_AUDIENCE,
            JWT_SECRET_KEY="a-completely-different-signing-key",
        )
        token = create_access_token(other, 1, "a@example.com", "User")

        with pytest.raises(JWTError):
            decode_access_token(token, test_settings)

    def test_default_lifetime_is_configurable(self):
        assert Settings().ACCESS_TOKEN_EXPIRE_DAYS == 1825
        assert Settings(ACCESS_TOKEN_EXPIRE_DAYS=1).ACCESS_TOKEN_EXPIRE_DAYS == 1

    def test_settings_are_immutable(self, test_settings):
        with pytest.raises(Exception):
            test_settings.JWT_SECRET_KEY = "tampered"


class TestAccessPolicy:

    def test_principal_from_token(self, test_settings):
        token = create_access_token(test_settings, 3, "three@example.com", "User")
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)

        principal = asyncio.run(get_current_principal(credentials, test_settings))

        assert principal == Principal(user_id=3, email="three@example.com", role="User")

    def test_missing_credentials(self, test_settings):
        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(get_current_principal(None, test_settings))

        assert exc_info.value.status_code == 401

    def test_require_role(self):
        checker = require_role("Admin")
        admin = Principal(user_id=1, email="a@example.com", role="Admin")
        user = Principal(user_id=2, email="u@example.com", role="User")

        assert asyncio.run(checker(admin)) == admin
        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(checker(user))
        assert exc_info.value.status_code == 403
