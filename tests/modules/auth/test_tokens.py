"""Tests for modules/auth/tokens.py."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from modules.auth.exceptions import ExpiredTokenError, InvalidTokenError
from modules.auth.tokens import DEFAULT_TOKEN_TTL, TokenService

SECRET = "token-test-secret"


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret=SECRET)


class TestTokenService:
    def test_rejects_empty_secret(self):
        with pytest.raises(ValueError):
            TokenService(secret="")

    def test_default_ttl(self, tokens):
        assert tokens.ttl == DEFAULT_TOKEN_TTL == timedelta(hours=24)

    def test_issue_then_verify(self, tokens):
        """A freshly issued token verifies with the same subject."""
        claims = tokens.verify(tokens.issue(42))
        assert claims.subject == 42
        assert claims.expires_at > datetime.now(timezone.utc)

    def test_subject_encoded_as_string(self, tokens):
        payload = jwt.get_unverified_claims(tokens.issue(7))
        assert payload["sub"] == "7"
        assert payload["exp"] - payload["iat"] == int(DEFAULT_TOKEN_TTL.total_seconds())

    @pytest.mark.parametrize("subject", [0, -1, 2**31])
    def test_issue_rejects_non_positive_subject(self, tokens, subject):
        with pytest.raises(ValueError):
            tokens.issue(subject)

    def test_expired_token(self):
        """A token whose TTL has elapsed fails as expired, not invalid."""
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        issuer = TokenService(secret=SECRET, ttl=timedelta(hours=1), clock=lambda: past)
        token = issuer.issue(1)

        with pytest.raises(ExpiredTokenError) as exc_info:
            TokenService(secret=SECRET).verify(token)
        assert exc_info.value.message == "Token is expired"

    def test_wrong_signature(self, tokens):
        token = TokenService(secret="other-secret").issue(1)
        with pytest.raises(InvalidTokenError) as exc_info:
            tokens.verify(token)
        assert exc_info.value.message == "Invalid token"
        assert exc_info.value.reason

    def test_malformed_token(self, tokens):
        with pytest.raises(InvalidTokenError):
            tokens.verify("not.a.jwt")

    def test_tampered_payload(self, tokens):
        header, _, signature = tokens.issue(1).split(".")
        forged_payload = jwt.encode({"sub": "2"}, SECRET).split(".")[1]
        with pytest.raises(InvalidTokenError):
            tokens.verify(f"{header}.{forged_payload}.{signature}")

    @pytest.mark.parametrize("sub", [None, "abc", "0", "-3", "\u00b2", "1\u00b2", str(2**31), "9" * 5000])
    def test_bad_subject(self, tokens, sub):
        payload = {"exp": int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())}
        if sub is not None:
            payload["sub"] = sub
        token = jwt.encode(payload, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError) as exc_info:
            tokens.verify(token)
        assert exc_info.value.reason == "subject missing"

    def test_missing_expiry(self, tokens):
        token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError) as exc_info:
            tokens.verify(token)
        assert exc_info.value.reason == "expiry missing"

    def test_other_algorithm_rejected(self, tokens):
        exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
        token = jwt.encode({"sub": "1", "exp": exp}, SECRET, algorithm="HS512")
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_largest_subject(self, tokens):
        assert tokens.verify(tokens.issue(2**31 - 1)).subject == 2**31 - 1
