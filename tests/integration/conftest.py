"""Pytest configuration and fixtures for API integration tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.dependencies import reset_dependencies
from api.main import app


@pytest.fixture
def test_client() -> Generator[TestClient, None, None]:
    """FastAPI test client over a fresh in-memory store."""
    reset_dependencies()

    with TestClient(app) as client:
        yield client

    reset_dependencies()


@pytest.fixture
def execution_id(test_client: TestClient) -> str:
    """A RUNNING execution created through the API."""
    response = test_client.post("/v1/executions", json={"agent_id": "a1", "channel": "web"})
    assert response.status_code == 201
    return response.json()["execution_id"]
