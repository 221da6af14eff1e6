"""Helpers for building backend responses and mocked clients."""

from typing import Any
from unittest.mock import AsyncMock

import httpx


def make_response(
    status_code: int,
    json_data: Any = None,
    method: str = "GET",
    url: str = "http://backend.test/api",
) -> httpx.Response:
    """Create a properly formed httpx.Response with a request attached."""
    # A request is needed so raise_for_status() works
    request = httpx.Request(method, url)
    if json_data is None:
        return httpx.Response(status_code, request=request)
    return httpx.Response(status_code, json=json_data, request=request)


def mock_backend(**results: Any) -> AsyncMock:
    """Build a mocked BackendClient usable as an async context manager.

    Each keyword names a client method; exceptions become side effects and
    anything else becomes the awaited return value.
    """
    client = AsyncMock()
    for name, result in results.items():
        method = getattr(client, name)
        if isinstance(result, BaseException):
            method.side_effect = result
        else:
            method.return_value = result
    client.__aenter__.return_value = client
    client.__aexit__.return_value = None
    return client
