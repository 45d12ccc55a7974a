"""
Basic usage example of fastapi-request-context.

Demonstrates:
- Storing request-scoped values from a dependency
- Reading them back in the endpoint without passing them around
- Reading the whole context mapping through a dependency
"""

from fastapi import Depends, FastAPI, Request

from fastapi_request_context import (
    context_value,
    get_string,
    request_context,
    set_value,
)

app = FastAPI(title="Basic Request Context Example")


async def identify_client(request: Request) -> None:
    """Record who is calling before the endpoint runs."""
    api_key = request.headers.get("x-api-key")
    if api_key == "secret":
        set_value(request, "client", "trusted-client")
        set_value(request, "tier", "gold")


@app.get("/", dependencies=[Depends(identify_client)])
async def index(request: Request):
    """The endpoint reads what the dependency stored."""
    client = get_string(request, "client") or "anonymous"
    return {"message": f"Hello, {client}!"}


@app.get("/tier", dependencies=[Depends(identify_client)])
async def tier(value=Depends(context_value("tier", "free"))):
    """Inject a single context value."""
    return {"tier": value}


@app.get("/context", dependencies=[Depends(identify_client)])
async def whole_context(ctx: dict = Depends(request_context)):
    """Inject the live context mapping."""
    return ctx


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl http://localhost:8000/
    # curl -H "X-API-Key: secret" http://localhost:8000/
    # curl -H "X-API-Key: secret" http://localhost:8000/context
