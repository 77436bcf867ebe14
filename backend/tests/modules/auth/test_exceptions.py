"""Tests for auth module exceptions."""

from modules.auth.exceptions import (
    AuthenticationFailedError,
    CredentialHashingError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from shared.exceptions import AuthenticationError, InternalError


class TestTokenErrors:
    def test_invalid_token_error(self):
        """Should default to a generic message and code."""
        error = InvalidTokenError()
        assert error.code == "INVALID_TOKEN"
        assert isinstance(error, AuthenticationError)

    def test_expired_token_is_invalid_token(self):
        """Expired tokens are a kind of invalid token."""
        error = ExpiredTokenError()
        assert isinstance(error, InvalidTokenError)
        assert error.code == "TOKEN_EXPIRED"

    def test_missing_token_is_invalid_token(self):
        """Missing tokens are a kind of invalid token."""
        error = MissingTokenError()
        assert isinstance(error, InvalidTokenError)
        assert error.code == "MISSING_TOKEN"


class TestAuthenticationFailedError:
    def test_message_does_not_reveal_cause(self):
        """The same message covers unknown email and wrong password."""
        error = AuthenticationFailedError()
        assert error.code == "AUTHENTICATION_FAILED"
        assert error.message == "Invalid email or password"
        assert error.details == {}


class TestCredentialHashingError:
    def test_is_internal_error(self):
        """Hashing faults are internal, not authentication failures."""
        error = CredentialHashingError("salt generation failed")
        assert isinstance(error, InternalError)
        assert not isinstance(error, AuthenticationError)
        assert error.to_dict()["details"]["reason"] == "salt generation failed"
