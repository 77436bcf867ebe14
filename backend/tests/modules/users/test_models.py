import pytest
from pydantic import ValidationError

from modules.users.models import (
    ALLOWED_PAGE_LIMITS,
    PageRequest,
    PageResult,
    RegisterUserRequest,
    UserPreview,
)


class TestRegisterUserRequest:
    def test_accepts_snake_and_camel_case(self):
        """Both field names and aliases should populate the model."""
        snake = RegisterUserRequest(email="a@x.com", password="pw", first_name="A", last_name="B")
        camel = RegisterUserRequest.model_validate(
            {"email": "a@x.com", "password": "pw", "firstName": "A", "lastName": "B"}
        )
        assert snake.first_name == camel.first_name == "A"
        assert snake.last_name == camel.last_name == "B"

    def test_email_kept_as_supplied(self):
        """Emails are not normalised."""
        request = RegisterUserRequest(email="Mixed.Case@Example.COM", password="pw")
        assert request.email == "Mixed.Case@Example.COM"

    def test_display_fields_default_to_empty(self):
        """Only email and password are required."""
        request = RegisterUserRequest(email="a@x.com", password="pw")
        assert (request.first_name, request.last_name, request.company) == ("", "", "")

    def test_empty_password_rejected(self):
        """Password must be non-empty."""
        with pytest.raises(ValidationError):
            RegisterUserRequest(email="a@x.com", password="")

    def test_password_over_72_bytes_rejected(self):
        """bcrypt cannot hash more than 72 bytes."""
        with pytest.raises(ValidationError):
            RegisterUserRequest(email="a@x.com", password="é" * 37)

    def test_password_of_72_bytes_accepted(self):
        """The bcrypt limit itself is fine."""
        request = RegisterUserRequest(email="a@x.com", password="x" * 72)
        assert len(request.password) == 72


class TestPageModels:
    def test_allowed_limits(self):
        """Pages can hold 5, 10 or 25 users."""
        assert ALLOWED_PAGE_LIMITS == (5, 10, 25)

    def test_page_request_offset_is_zero_based(self):
        """offset = page * limit."""
        assert PageRequest(page=0, limit=10).offset == 0
        assert PageRequest(page=2, limit=5).offset == 10

    def test_page_request_ids_are_unique(self):
        """Each request gets its own correlation ID."""
        assert PageRequest(page=0, limit=5).request_id != PageRequest(page=0, limit=5).request_id

    def test_page_result_serializes(self):
        """PageResult should dump users as id/email pairs."""
        result = PageResult(
            users=[UserPreview(id="1", email="a@x.com")],
            total=1,
            page=0,
            limit=5,
        )
        assert result.model_dump() == {
            "users": [{"id": "1", "email": "a@x.com"}],
            "total": 1,
            "page": 0,
            "limit": 5,
        }
