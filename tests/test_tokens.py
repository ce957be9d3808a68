"""
Tests for token issuance, verification and hashing.
"""
from datetime import timedelta

from admin_portal.auth import (
    ONE_TIME_TOKEN,
    SESSION_TOKEN,
    TokenService,
    get_password_hash,
    get_token_service,
    hash_token,
    verify_password,
)
from admin_portal.config import Settings


class TestTokenService:
    """Test signing and verifying tokens."""

    def test_session_token_round_trip(self):
        """A fresh session token verifies and carries the user id."""
        tokens = get_token_service()
        result = tokens.verify_token(tokens.issue_session_token("user-1"))
        assert result.valid
        assert result.user_id == "user-1"
        assert result.claims["type"] == SESSION_TOKEN
        assert "jti" not in result.claims

    def test_one_time_token_has_nonce(self):
        """One-time tokens carry a random jti so two links never collide."""
        tokens = get_token_service()
        first = tokens.issue_one_time_token("user-1")
        second = tokens.issue_one_time_token("user-1")
        assert first != second

        claims = tokens.verify_token(first).claims
        assert claims["type"] == ONE_TIME_TOKEN
        assert len(claims["jti"]) == 32

    def test_expired_token_is_invalid(self):
        tokens = get_token_service()
        token = tokens.issue_session_token("user-1", expires_delta=timedelta(seconds=-1))
        result = tokens.verify_token(token)
        assert not result.valid
        assert result.claims is None

    def test_failures_are_indistinguishable(self):
        """Bad signature, garbage and expiry all report the same error."""
        tokens = get_token_service()
        other = TokenService(Settings(secret_key="another-secret"))

        expired = tokens.issue_session_token("u", expires_delta=timedelta(seconds=-1))
        wrong_key = other.issue_session_token("u")

        errors = {
            tokens.verify_token(expired).error,
            tokens.verify_token(wrong_key).error,
            tokens.verify_token("not-a-jwt").error,
        }
        assert errors == {"invalid_token"}


class TestHashing:
    """Test token digests and password hashing."""

    def test_hash_token_is_deterministic(self):
        assert hash_token("abc") == hash_token("abc")
        assert len(hash_token("abc")) == 64

    def test_hash_token_differs_per_token(self):
        assert hash_token("abc") != hash_token("abd")

    def test_password_hash_verifies(self):
        hashed = get_password_hash("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert verify_password("s3cret-pass", hashed)
        assert not verify_password("wrong", hashed)

    def test_missing_password_never_verifies(self):
        assert not verify_password("anything", None)
