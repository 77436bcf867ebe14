"""Fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from shared.config import Settings
from tests.conftest import TEST_BCRYPT_ROUNDS, TEST_JWT_SECRET


@pytest.fixture
def container() -> ServiceContainer:
    """A container with fast hashing and the test secret."""
    return ServiceContainer(
        Settings(_env_file=None, jwt_secret=TEST_JWT_SECRET, bcrypt_rounds=TEST_BCRYPT_ROUNDS)
    )


@pytest.fixture
def client(container):
    """A test client that runs the app lifespan."""
    with TestClient(create_app(container)) as client:
        yield client


def register(client: TestClient, email: str, password: str = "pw-123", **extra) -> str:
    """Register a user through the API and return the new ID."""
    response = client.post("/api/users", json={"email": email, "password": password, **extra})
    assert response.status_code == 201, response.text
    return response.json()["id"]
