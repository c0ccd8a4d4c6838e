"""
Shared fixtures for simple_fetch tests.
"""
import pytest
from unittest.mock import AsyncMock

import httpx


@pytest.fixture
def mock_httpx_async_client():
    """Mock httpx.AsyncClient for testing."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def make_response():
    """Build real httpx.Response objects with a bound request."""

    def _make(status_code=200, json=None, text=None, headers=None, method="GET",
              url="https://api.example.com/resource"):
        kwargs = {"headers": headers or {}}
        if json is not None:
            kwargs["json"] = json
        elif text is not None:
            kwargs["text"] = text
        return httpx.Response(
            status_code,
            request=httpx.Request(method, url),
            **kwargs,
        )

    return _make


@pytest.fixture
def json_client(mock_httpx_async_client, make_response):
    """Mock client answering every request with 200 and a JSON body."""
    mock_httpx_async_client.request = AsyncMock(
        return_value=make_response(200, json={"message": "response"})
    )
    return mock_httpx_async_client
