"""Locator — find or install exactly one carrier per request."""

from __future__ import annotations

import logging
from typing import Any

from starlette.requests import Request
from starlette.websockets import WebSocket

from fastapi_request_context._types import ContextCarrier
from fastapi_request_context.context import ContextReadCloser
from fastapi_request_context.exceptions import CarrierInstallError
from fastapi_request_context.search import DEFAULT_MAX_DEPTH, find_carrier, is_carrier
from fastapi_request_context.trace import CarrierMatch

logger = logging.getLogger(__name__)

DEFAULT_HANDLE_ATTRIBUTE = "body"

_handle_attributes: dict[type, str] = {
    Request: "_receive",
    WebSocket: "_receive",
}


def register_handle_attribute(request_type: type, attribute: str) -> None:
    """Declare which attribute of ``request_type`` holds the request handle."""
    _handle_attributes[request_type] = attribute


def handle_attribute(request: Any) -> str:
    """Return the name of the attribute holding ``request``'s handle."""
    for cls in type(request).__mro__:
        attribute = _handle_attributes.get(cls)
        if attribute is not None:
            return attribute
    return DEFAULT_HANDLE_ATTRIBUTE


def find(request: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> CarrierMatch | None:
    """Locate the request's carrier without installing one."""
    handle = getattr(request, handle_attribute(request), None)
    return find_carrier(handle, max_depth=max_depth)


def resolve(request: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> ContextCarrier:
    """Return the request's carrier, installing one at the head if none exists."""
    attribute = handle_attribute(request)
    handle = getattr(request, attribute, None)

    if is_carrier(handle):
        return handle

    match = find_carrier(handle, max_depth=max_depth)
    if match is not None:
        logger.debug(
            "Found nested context carrier at %s.%s",
            attribute,
            ".".join(match.path),
        )
        return match.carrier

    carrier = ContextReadCloser(handle)
    try:
        setattr(request, attribute, carrier)
    except (AttributeError, TypeError) as exc:
        raise CarrierInstallError(type(request), attribute) from exc

    logger.debug(
        "Installed context carrier on %s.%s", type(request).__qualname__, attribute
    )
    return carrier
