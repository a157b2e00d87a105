"""Pytest configuration and fixtures for the function app."""

from collections.abc import Callable

import azure.functions as func
import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


@pytest.fixture
def invoke() -> Callable[..., func.HttpResponse]:
    """Call a decorated trigger the way the Functions host does."""

    def _invoke(trigger, req: func.HttpRequest) -> func.HttpResponse:
        return trigger.build().get_user_function()(req)

    return _invoke


@pytest.fixture
def make_request() -> Callable[..., func.HttpRequest]:
    """Build an HttpRequest for a route under /api."""

    def _make_request(method: str, route: str, body: bytes = b"") -> func.HttpRequest:
        return func.HttpRequest(
            method=method,
            url=f"/api/{route}",
            headers={"Content-Type": "application/json"},
            params={},
            body=body,
        )

    return _make_request
