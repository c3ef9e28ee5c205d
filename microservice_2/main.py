"""microservice-2 FastAPI application.

Serves the greeting microservice-1 fetches through its resilient invoker.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .config import SERVICE_NAME


@asynccontextmanager
async def lifespan(app: FastAPI):
    print(f"{SERVICE_NAME} started")
    yield


app = FastAPI(title=SERVICE_NAME, lifespan=lifespan)


@app.get("/health")
def health() -> dict[str, str]:
    """Basic liveness endpoint."""
    return {"status": "ok"}


@app.get("/hello", response_class=PlainTextResponse)
def hello() -> str:
    return "Hello from Microservice 2!"
