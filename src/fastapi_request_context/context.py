"""ContextReadCloser — handle decorator carrying a per-request mapping."""

from __future__ import annotations

from typing import Any

from starlette.types import Receive

from fastapi_request_context._types import ContextMapping, ReadCloser


class ContextReadCloser:
    """Wraps a request handle and owns a mutable key/value mapping.

    Reads, closes, calls and any other attribute access are forwarded to
    the wrapped handle unchanged, so the carrier can replace a body stream
    or an ASGI ``receive`` callable in place.
    """

    __slots__ = ("__wrapped__", "_context")

    def __init__(
        self,
        handle: ReadCloser | Receive | None,
        context: ContextMapping | None = None,
    ) -> None:
        self.__wrapped__ = handle
        self._context: ContextMapping = {} if context is None else context

    def context(self) -> ContextMapping:
        return self._context

    def set_context(self, context: ContextMapping) -> None:
        self._context = context

    def read(self, *args: Any, **kwargs: Any) -> Any:
        return self.__wrapped__.read(*args, **kwargs)

    def close(self) -> Any:
        return self.__wrapped__.close()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.__wrapped__(*args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return getattr(self.__wrapped__, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__wrapped__!r}, keys={len(self._context)})"
