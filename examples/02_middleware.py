"""
Sharing context between middleware and endpoints.

Demonstrates:
- Installing the carrier once with RequestContextMiddleware
- Setting values from pure ASGI middleware
- Finding the carrier again after inner middleware wraps ``receive``
"""

import time
import uuid

from fastapi import FastAPI, Request
from starlette.types import ASGIApp, Receive, Scope, Send

from fastapi_request_context import (
    RequestContextMiddleware,
    get_all,
    get_value,
    set_value,
)


class RequestIdMiddleware:
    """Tags each request with an id and a start time."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            request = Request(scope, receive)
            set_value(request, "request_id", uuid.uuid4().hex)
            set_value(request, "started_at", time.monotonic())
        await self.app(scope, receive, send)


class BodySizeMiddleware:
    """Wraps receive without knowing anything about request context."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        async def sized_receive():
            message = await receive()
            scope.setdefault("state", {})["body_bytes"] = len(message.get("body", b""))
            return message

        await self.app(scope, sized_receive, send)


app = FastAPI(title="Middleware Request Context Example")

# Last added runs first: the carrier is installed before the others see receive.
app.add_middleware(BodySizeMiddleware)
app.add_middleware(RequestIdMiddleware)
app.add_middleware(RequestContextMiddleware)


@app.post("/items")
async def create_item(request: Request):
    item = await request.json()
    elapsed = time.monotonic() - get_value(request, "started_at")
    return {
        "request_id": get_value(request, "request_id"),
        "item": item,
        "elapsed_ms": round(elapsed * 1000, 3),
        "context_keys": sorted(get_all(request)),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl -X POST -H "Content-Type: application/json" -d '{"name": "x"}' http://localhost:8000/items
