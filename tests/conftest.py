"""
Shared pytest fixtures for the Movie API tests.

Every test gets a fresh application backed by an in-memory SQLite
database, so state never leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from movie_api.core.config import Settings
from movie_api.core.security import TokenService
from movie_api.main import create_app

TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings():
    return Settings(
        SECRET_KEY=TEST_SECRET,
        DATABASE_URL="sqlite://",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # entering the context runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture
def token_service(settings):
    return TokenService.from_settings(settings)


@pytest.fixture
def registered_user(client):
    """Register a user and return the response body."""
    resp = client.post(
        "/api/auth/register",
        json={"name": "Test User", "email": "tester@example.com", "password": "s3cret-pass"},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def auth_headers(registered_user):
    return {"Authorization": f"Bearer {registered_user['token']}"}


@pytest.fixture
def director(client, auth_headers):
    resp = client.post(
        "/api/directors",
        json={"name": "Greta Gerwig", "birthYear": 1983, "nationality": "American"},
        headers=auth_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
