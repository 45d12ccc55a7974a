"""FastAPI dependencies exposing the request context."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from starlette.requests import Request

from fastapi_request_context._types import ContextKey, ContextMapping
from fastapi_request_context.accessors import get_all, get_value


def request_context(request: Request) -> ContextMapping:
    """FastAPI dependency returning the request's live context mapping."""
    return get_all(request)


def context_value(key: ContextKey, default: Any = None) -> Callable[[Request], Any]:
    """Return a FastAPI dependency that reads ``key`` from the request context."""

    def dependency(request: Request) -> Any:
        return get_value(request, key, default)

    return dependency
