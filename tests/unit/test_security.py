"""
Unit tests for user_accounts.core.security
"""
import time

import jwt
import pytest
from user_accounts.core.exceptions import InvalidTokenError
from user_accounts.core.security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
    extract_bearer_token,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self, mock_settings):
        result = hash_password("Str0ng!Pass")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self, mock_settings):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self, mock_settings):
        result = hash_password("secret123")
        assert result != "secret123"

    def test_uses_configured_rounds(self, mock_settings):
        mock_settings.bcrypt_rounds = 5
        assert hash_password("pw").startswith("$2b$05$")

    def test_default_cost_is_ten_rounds(self, monkeypatch):
        from user_accounts.core.config import Settings

        monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)
        assert Settings().bcrypt_rounds == 10


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self, mock_settings):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self, mock_settings):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_password_longer_than_72_bytes(self, mock_settings):
        long_password = "Str0ng!Pass" + "x" * 69
        hashed = hash_password(long_password)
        assert verify_password(long_password, hashed) is True
        assert verify_password("Str0ng!Pass", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestJwtToken:
    """Tests for create_jwt_token and decode_jwt_token"""

    def test_create_and_decode_roundtrip(self, mock_settings):
        payload = {"id": "user-123", "email": "test@example.com", "name": "Test User"}
        token = create_jwt_token(payload)
        decoded = decode_jwt_token(token)
        assert decoded["id"] == "user-123"
        assert decoded["email"] == "test@example.com"
        assert decoded["name"] == "Test User"
        assert "iat" in decoded
        assert "exp" in decoded

    def test_expires_two_hours_after_issue(self, mock_settings):
        decoded = decode_jwt_token(create_jwt_token({"id": "u"}))
        assert decoded["exp"] - decoded["iat"] == 2 * 60 * 60

    def test_decode_invalid_token_raises(self, mock_settings):
        with pytest.raises(InvalidTokenError) as exc_info:
            decode_jwt_token("invalid.jwt.token")
        assert "Invalid token" in str(exc_info.value)

    def test_decode_tampered_token_raises(self, mock_settings):
        token = create_jwt_token({"id": "user-1"})
        tampered = token[:-5] + "xxxxx"
        with pytest.raises(InvalidTokenError):
            decode_jwt_token(tampered)

    def test_decode_expired_token_raises(self, mock_settings):
        now = int(time.time())
        token = jwt.encode(
            {"id": "user-1", "iat": now - 3 * 3600, "exp": now - 3600},
            mock_settings.jwt_secret_key,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            decode_jwt_token(token)

    def test_decode_token_from_other_secret_raises(self, mock_settings):
        token = jwt.encode({"id": "user-1"}, "some-other-secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            decode_jwt_token(token)


class TestExtractBearerToken:
    """Tests for extract_bearer_token"""

    def test_bearer_header(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_takes_second_part_regardless_of_scheme(self):
        assert extract_bearer_token("Token abc") == "abc"

    def test_missing_or_single_part_returns_none(self):
        assert extract_bearer_token(None) is None
        assert extract_bearer_token("") is None
        assert extract_bearer_token("abc.def.ghi") is None
