"""RequestContextError hierarchy."""

from __future__ import annotations


class RequestContextError(Exception):
    """Base for all request context errors."""


class CarrierInstallError(RequestContextError):
    """The request's handle field could not be replaced with a carrier."""

    def __init__(self, request_type: type, attribute: str) -> None:
        detail = (
            f"Cannot install context carrier on {request_type.__qualname__}.{attribute}"
        )
        super().__init__(detail)
        self.detail = detail
        self.request_type = request_type
        self.attribute = attribute
