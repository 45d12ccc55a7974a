"""Tests for the ContextReadCloser carrier."""

from __future__ import annotations

import io
from typing import Any

import pytest

from fastapi_request_context._types import ContextCarrier, ReadCloser
from fastapi_request_context.context import ContextReadCloser


class _FailingStream:
    def read(self, *args: Any) -> bytes:
        raise OSError("connection reset")

    def close(self) -> None:
        raise OSError("already closed")


class TestContextReadCloser:
    def test_context_defaults_to_empty_dict(self) -> None:
        carrier = ContextReadCloser(io.BytesIO())
        assert carrier.context() == {}
        assert isinstance(carrier.context(), dict)

    def test_context_returns_same_mapping(self) -> None:
        carrier = ContextReadCloser(io.BytesIO())
        carrier.context()["key"] = "value"
        assert carrier.context() is carrier.context()
        assert carrier.context()["key"] == "value"

    def test_explicit_initial_context_is_kept(self) -> None:
        initial = {"preloaded": True}
        carrier = ContextReadCloser(io.BytesIO(), initial)
        assert carrier.context() is initial

    def test_set_context_swaps_reference(self) -> None:
        carrier = ContextReadCloser(io.BytesIO())
        old = carrier.context()
        old["x"] = 1
        carrier.set_context({})
        assert carrier.context() == {}
        assert old == {"x": 1}

    def test_contexts_not_shared_between_instances(self) -> None:
        first = ContextReadCloser(io.BytesIO())
        second = ContextReadCloser(io.BytesIO())
        first.context()["x"] = 1
        assert "x" not in second.context()

    def test_read_passes_through(self) -> None:
        carrier = ContextReadCloser(io.BytesIO(b"hello world"))
        assert carrier.read(5) == b"hello"
        assert carrier.read() == b" world"

    def test_close_passes_through(self) -> None:
        stream = io.BytesIO(b"data")
        carrier = ContextReadCloser(stream)
        carrier.close()
        assert stream.closed

    def test_read_errors_propagate(self) -> None:
        carrier = ContextReadCloser(_FailingStream())
        with pytest.raises(OSError, match="connection reset"):
            carrier.read()

    def test_close_errors_propagate(self) -> None:
        carrier = ContextReadCloser(_FailingStream())
        with pytest.raises(OSError, match="already closed"):
            carrier.close()

    async def test_call_forwards_to_receive_callable(self) -> None:
        async def receive() -> dict[str, Any]:
            return {"type": "http.request", "body": b"abc", "more_body": False}

        carrier = ContextReadCloser(receive)
        message = await carrier()
        assert message["body"] == b"abc"

    def test_other_attributes_are_forwarded(self) -> None:
        stream = io.BytesIO(b"data")
        carrier = ContextReadCloser(stream)
        assert carrier.closed is False
        assert carrier.getvalue() == b"data"

    def test_missing_attribute_raises_attribute_error(self) -> None:
        carrier = ContextReadCloser(io.BytesIO())
        with pytest.raises(AttributeError):
            carrier.does_not_exist  # noqa: B018

    def test_wrapped_handle_is_exposed(self) -> None:
        stream = io.BytesIO()
        carrier = ContextReadCloser(stream)
        assert carrier.__wrapped__ is stream

    def test_wraps_none_handle(self) -> None:
        carrier = ContextReadCloser(None)
        assert carrier.__wrapped__ is None
        assert carrier.context() == {}

    def test_satisfies_capabilities(self) -> None:
        carrier = ContextReadCloser(io.BytesIO())
        assert isinstance(carrier, ContextCarrier)
        assert isinstance(carrier, ReadCloser)

    def test_plain_stream_is_not_a_carrier(self) -> None:
        assert not isinstance(io.BytesIO(), ContextCarrier)

    def test_repr_mentions_key_count(self) -> None:
        carrier = ContextReadCloser(None, {"a": 1, "b": 2})
        assert repr(carrier) == "ContextReadCloser(None, keys=2)"

    async def test_call_errors_propagate(self) -> None:
        async def receive() -> dict[str, Any]:
            raise OSError("client disconnected")

        carrier = ContextReadCloser(receive)
        with pytest.raises(OSError, match="client disconnected"):
            await carrier()
