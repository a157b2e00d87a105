"""Pytest configuration and fixtures."""

import pytest
from api.main import app
from fastapi.testclient import TestClient


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


@pytest.fixture
def client() -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)
