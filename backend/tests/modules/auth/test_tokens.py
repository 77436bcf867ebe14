import pytest
import jwt
from datetime import datetime, timedelta, timezone

from modules.auth.tokens import TokenAuthority, DEFAULT_LIFETIME
from modules.auth.interfaces import ITokenAuthority
from modules.auth.models import TokenClaims
from modules.auth.exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)
from tests.conftest import TEST_JWT_SECRET


def flip_signature_char(token: str) -> str:
    """Change one character in the middle of the signature segment."""
    header, payload, signature = token.split(".")
    index = len(signature) // 2
    replacement = "A" if signature[index] != "A" else "B"
    signature = signature[:index] + replacement + signature[index + 1:]
    return ".".join([header, payload, signature])


class TestTokenAuthority:
    def test_issue_then_verify_round_trips_identity(self, tokens):
        """verify(issue(...)) should return the same subject and email."""
        token = tokens.issue("user-123", "test@example.com")
        claims = tokens.verify(token)
        assert claims.subject == "user-123"
        assert claims.email == "test@example.com"

    def test_expiry_is_one_hour_after_issuance(self, tokens):
        """Tokens should expire one lifetime after they were issued."""
        claims = tokens.verify(tokens.issue("user-123", "test@example.com"))
        assert claims.expires_at - claims.issued_at == timedelta(hours=1)
        assert DEFAULT_LIFETIME == timedelta(hours=1)

    def test_token_is_hs256_jwt(self, tokens):
        """Issued tokens should be HS256 JWTs with sub/email/iat/exp."""
        token = tokens.issue("user-123", "test@example.com")
        payload = jwt.decode(token, TEST_JWT_SECRET, algorithms=["HS256"])
        assert payload["sub"] == "user-123"
        assert payload["email"] == "test@example.com"
        assert {"iat", "exp"} <= payload.keys()

    def test_issue_claims_reissues_identity(self, tokens):
        """issue_claims should mint a token for the same identity."""
        original = tokens.verify(tokens.issue("user-123", "test@example.com"))
        claims = tokens.verify(tokens.issue_claims(original))
        assert (claims.subject, claims.email) == ("user-123", "test@example.com")

    def test_expired_token_rejected(self):
        """A token past its expiry should raise ExpiredTokenError."""
        two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
        stale = TokenAuthority(secret=TEST_JWT_SECRET, clock=lambda: two_hours_ago)
        token = stale.issue("user-123", "test@example.com")

        fresh = TokenAuthority(secret=TEST_JWT_SECRET)
        with pytest.raises(ExpiredTokenError):
            fresh.verify(token)

    def test_expired_token_is_an_invalid_token(self):
        """ExpiredTokenError should be catchable as InvalidTokenError."""
        two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
        authority = TokenAuthority(secret=TEST_JWT_SECRET, clock=lambda: two_hours_ago)
        with pytest.raises(InvalidTokenError):
            authority.verify(authority.issue("user-123", "test@example.com"))

    def test_tampered_signature_rejected(self, tokens):
        """Flipping a byte of the signature should invalidate the token."""
        token = tokens.issue("user-123", "test@example.com")
        with pytest.raises(InvalidTokenError):
            tokens.verify(flip_signature_char(token))

    def test_wrong_secret_rejected(self, tokens):
        """A token signed with another secret should be rejected."""
        other = TokenAuthority(secret="another-secret-key-for-testing-only-0123")
        with pytest.raises(InvalidTokenError):
            tokens.verify(other.issue("user-123", "test@example.com"))

    def test_malformed_token_rejected(self, tokens):
        """Garbage should raise InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            tokens.verify("not-a-valid-token")

    def test_missing_claims_rejected(self, tokens):
        """A correctly signed token without an email should be rejected."""
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "user-123", "iat": now, "exp": now + timedelta(hours=1)},
            TEST_JWT_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_empty_token_rejected(self, tokens):
        """An empty token should raise MissingTokenError."""
        with pytest.raises(MissingTokenError):
            tokens.verify("")

    def test_none_token_rejected(self, tokens):
        """None should raise MissingTokenError."""
        with pytest.raises(MissingTokenError):
            tokens.verify(None)

    def test_empty_secret_not_allowed(self):
        """The authority needs a signing secret."""
        with pytest.raises(ValueError):
            TokenAuthority(secret="")

    def test_claims_are_immutable(self, tokens):
        """TokenClaims should be frozen."""
        claims = tokens.verify(tokens.issue("user-123", "test@example.com"))
        assert isinstance(claims, TokenClaims)
        with pytest.raises(Exception):
            claims.subject = "someone-else"

    def test_implements_interface(self, tokens):
        """TokenAuthority should satisfy ITokenAuthority."""
        assert isinstance(tokens, ITokenAuthority)
