"""Pytest fixtures for API integration tests.

The app runs its real lifespan against the in-memory SQLite database from
the test settings, so every client starts with an empty schema.
"""

import pytest
from fastapi.testclient import TestClient

from hrdesk.presentation.api.app import API_V1_PREFIX, create_app
from hrdesk.presentation.api.config import get_api_settings
from hrdesk.presentation.api.dependencies import reset_engine_cache
from hrdesk_config.settings import clear_settings_cache


@pytest.fixture
def operations_url() -> str:
    """URL of the operations endpoint."""
    return f"{API_V1_PREFIX}/operations"


@pytest.fixture
def test_client():
    """Create a test client with a fresh in-memory database."""
    clear_settings_cache()
    get_api_settings.cache_clear()
    reset_engine_cache()

    app = create_app()
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client

    reset_engine_cache()


@pytest.fixture
def call(test_client, operations_url):
    """Post an operation and return the response."""

    def _call(operation: str, headers: dict | None = None, **arguments):
        return test_client.post(
            operations_url,
            json={"operation": operation, "arguments": arguments},
            headers=headers or {},
        )

    return _call


@pytest.fixture
def registered_user(call) -> dict:
    """Sign up a user and return the credentials used."""
    credentials = {
        "username": "jdoe",
        "email": "jdoe@example.com",
        "password": "SecurePassword123!",
    }
    response = call("signup", **credentials)
    assert response.status_code == 200
    return credentials


@pytest.fixture
def auth_headers(call, registered_user) -> dict:
    """Bearer header for the registered user."""
    response = call(
        "login",
        username=registered_user["username"],
        password=registered_user["password"],
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}


@pytest.fixture
def employee(call) -> dict:
    """Create one employee and return its data."""
    response = call(
        "addEmployee",
        first_name="Ann",
        last_name="Lee",
        designation="Engineer",
        department="R&D",
        email="ann@example.com",
    )
    assert response.status_code == 200
    return response.json()["data"]
