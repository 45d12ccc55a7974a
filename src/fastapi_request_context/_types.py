"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Protocol, runtime_checkable

ContextKey = Hashable
ContextMapping = dict[Any, Any]


@runtime_checkable
class ReadCloser(Protocol):
    """A readable, closable handle such as a request body stream."""

    def read(self, *args: Any, **kwargs: Any) -> Any: ...
    def close(self) -> Any: ...


@runtime_checkable
class ContextCarrier(Protocol):
    """Capability of a handle decorator that carries a per-request mapping.

    Decorators that want to stay transparent to carrier discovery expose
    the handle they wrap as ``__wrapped__``, the same convention used by
    :func:`functools.wraps` and :func:`inspect.unwrap`.
    """

    def context(self) -> ContextMapping: ...
    def set_context(self, context: ContextMapping) -> None: ...
