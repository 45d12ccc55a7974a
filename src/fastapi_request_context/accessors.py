"""Public accessors for request-scoped values."""

from __future__ import annotations

from typing import Any

from fastapi_request_context._types import ContextKey, ContextMapping
from fastapi_request_context.locator import resolve


def set_value(request: Any, key: ContextKey, value: Any) -> None:
    resolve(request).context()[key] = value


def get_value(request: Any, key: ContextKey, default: Any = None) -> Any:
    return resolve(request).context().get(key, default)


def get_ok(request: Any, key: ContextKey) -> tuple[Any, bool]:
    """Return ``(value, True)`` if ``key`` is stored, else ``(None, False)``."""
    context = resolve(request).context()
    if key in context:
        return context[key], True
    return None, False


def get_string(request: Any, key: ContextKey) -> str:
    """Return the stored value if it is a string, otherwise ``""``."""
    value = resolve(request).context().get(key)
    return value if isinstance(value, str) else ""


def get_all(request: Any) -> ContextMapping:
    """Return the live mapping; changes to it are seen by later accessors."""
    return resolve(request).context()


def delete(request: Any, key: ContextKey) -> None:
    resolve(request).context().pop(key, None)


def clear(request: Any) -> None:
    """Give the request a fresh empty mapping.

    Mappings previously returned by :func:`get_all` are detached, not
    emptied, and keep their values.
    """
    resolve(request).set_context({})
