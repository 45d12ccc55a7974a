"""Shared pytest fixtures for fastapi-request-context tests."""

from __future__ import annotations

import io
from typing import Any

import pytest
from starlette.requests import Request


class BodyRequest:
    """Minimal request-like object whose handle is a ``body`` stream."""

    def __init__(self, body: Any = None) -> None:
        self.body = body


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        return Request(scope)

    return _make


@pytest.fixture
def make_body_request() -> Any:
    """Factory for request-like objects carrying a readable body stream."""

    def _make(data: bytes = b"payload") -> BodyRequest:
        return BodyRequest(io.BytesIO(data))

    return _make
