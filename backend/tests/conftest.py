"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
import pytest_asyncio
from datetime import timedelta

from api.dependencies import reset_container
from modules.auth.hashing import BcryptPasswordHasher
from modules.auth.tokens import TokenAuthority
from modules.users.models import RegisterUserRequest
from modules.users.service import build_directory_service


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"

# Lowest cost bcrypt accepts; keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


def make_candidate(
    email: str = "daniel.taylor@example.com",
    password: str = "daniel2024",
    first_name: str = "Daniel",
    last_name: str = "Taylor",
    company: str = "NextGen Labs",
) -> RegisterUserRequest:
    """Build a registration candidate with sensible defaults."""
    return RegisterUserRequest(
        email=email,
        password=password,
        first_name=first_name,
        last_name=last_name,
        company=company,
    )


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    """Provide a fast bcrypt hasher."""
    return BcryptPasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def tokens() -> TokenAuthority:
    """Provide a token authority with the test secret."""
    return TokenAuthority(secret=TEST_JWT_SECRET, lifetime=timedelta(hours=1))


@pytest_asyncio.fixture
async def service(hasher, tokens):
    """Provide a directory service; stops its pagination worker afterwards."""
    service = build_directory_service(hasher=hasher, tokens=tokens)
    yield service
    await service.pagination.aclose()


@pytest.fixture
def directory(service):
    """The directory owned by the service fixture."""
    return service.directory


@pytest.fixture
def channel(service):
    """The pagination channel owned by the service fixture."""
    return service.pagination
