"""FastAPI Request Context - request-scoped values carried on the request handle."""

from fastapi_request_context._types import ContextCarrier, ReadCloser
from fastapi_request_context.accessors import (
    clear,
    delete,
    get_all,
    get_ok,
    get_string,
    get_value,
    set_value,
)
from fastapi_request_context.context import ContextReadCloser
from fastapi_request_context.dependency import context_value, request_context
from fastapi_request_context.exceptions import CarrierInstallError, RequestContextError
from fastapi_request_context.locator import (
    find,
    handle_attribute,
    register_handle_attribute,
    resolve,
)
from fastapi_request_context.middleware import RequestContextMiddleware
from fastapi_request_context.search import DEFAULT_MAX_DEPTH, find_carrier, is_carrier
from fastapi_request_context.trace import CarrierMatch

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "CarrierInstallError",
    "CarrierMatch",
    "ContextCarrier",
    "ContextReadCloser",
    "ReadCloser",
    "RequestContextError",
    "RequestContextMiddleware",
    "clear",
    "context_value",
    "delete",
    "find",
    "find_carrier",
    "get_all",
    "get_ok",
    "get_string",
    "get_value",
    "handle_attribute",
    "is_carrier",
    "register_handle_attribute",
    "request_context",
    "resolve",
    "set_value",
]
