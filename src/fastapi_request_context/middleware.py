"""RequestContextMiddleware — install the carrier on the ASGI receive channel."""

from __future__ import annotations

import logging

from starlette.types import ASGIApp, Receive, Scope, Send

from fastapi_request_context.context import ContextReadCloser
from fastapi_request_context.search import is_carrier

logger = logging.getLogger(__name__)


class RequestContextMiddleware:
    """Pure ASGI middleware wrapping ``receive`` in a :class:`ContextReadCloser`.

    Every ``Request`` built downstream (other middleware, dependencies, the
    endpoint) reaches the same carrier, even when inner middleware wraps
    ``receive`` again.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket") or is_carrier(receive):
            await self.app(scope, receive, send)
            return

        logger.debug(
            "Installing context carrier for %s %s", scope["type"], scope.get("path")
        )
        await self.app(scope, ContextReadCloser(receive), send)
