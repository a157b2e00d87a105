"""Pytest configuration for common-py tests."""

import pytest

from common.services import SampleUserService


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


@pytest.fixture
def user_service() -> SampleUserService:
    """Create the sample user service."""
    return SampleUserService()
