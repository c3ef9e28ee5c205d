"""microservice-1 FastAPI application.

Responsibilities:
- Serve `GET /hello` with its own greeting.
- Call microservice-2 through the ResilientInvoker on `GET /call-peer`.

Important note:
`/call-peer` always answers 200 with a text body, even when the peer is down.
The body says what happened; the `X-Invocation-Outcome` header says it in a
form scripts can check.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .config import (
    PEER_FALLBACK_ADDRESS,
    PEER_NAME,
    PEER_PATH,
    PEER_PRIMARY_ADDRESS,
    PEER_TIMEOUT_SECONDS,
    SERVICE_NAME,
)
from .invoker import ResilientInvoker
from .models import InvocationResult, Target

# Built at import time: bad addresses or a bad timeout stop the process here.
peer = Target.from_env_values(PEER_NAME, PEER_PRIMARY_ADDRESS, PEER_FALLBACK_ADDRESS)
invoker = ResilientInvoker(timeout=PEER_TIMEOUT_SECONDS, path=PEER_PATH)


@asynccontextmanager
async def lifespan(app: FastAPI):
    print(f"{SERVICE_NAME} started .....")
    print(f"[Config] peer {peer.name}: primary={peer.primary} fallback={peer.fallback}")
    yield


app = FastAPI(title=SERVICE_NAME, lifespan=lifespan)


@app.get("/health")
def health() -> dict[str, str]:
    """Basic liveness endpoint."""
    return {"status": "ok"}


@app.get("/hello", response_class=PlainTextResponse)
def hello() -> str:
    return "Hello from Microservice 1!"


@app.get("/call-peer", response_class=PlainTextResponse)
@app.get("/call-ms2", response_class=PlainTextResponse)
def call_peer() -> PlainTextResponse:
    """Call the peer and describe the outcome as plain text (always 200)."""
    result = invoker.invoke(peer)

    headers = {"X-Invocation-Outcome": "success" if result.ok else "failure"}
    if result.served_by is not None:
        headers["X-Served-By"] = str(result.served_by)

    return PlainTextResponse(result.describe(SERVICE_NAME), headers=headers)


@app.get("/call-peer/details", response_model=InvocationResult)
def call_peer_details() -> InvocationResult:
    """Same call as `/call-peer`, returned as the full structured result."""
    return invoker.invoke(peer)
