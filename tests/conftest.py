"""Shared fixtures: a fake peer network on httpx.MockTransport, and real
loopback servers for the timing tests."""

from __future__ import annotations

import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Callable, Generator

import httpx
import pytest


class FakePeerNetwork:
    """Routes requests by `host:port`.

    Unknown addresses behave like a refused connection. Every request is
    recorded in `calls` so tests can count attempts per address.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.calls: list[str] = []

    def serve(self, address: str, text: str, status_code: int = 200) -> None:
        self.routes[address] = lambda request: httpx.Response(status_code, text=text)

    def serve_with(self, address: str, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[address] = responder

    def unresolvable(self, address: str) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)

        self.routes[address] = _raise

    def timing_out(self, address: str) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        self.routes[address] = _raise

    def calls_to(self, address: str) -> int:
        return self.calls.count(address)

    def handler(self, request: httpx.Request) -> httpx.Response:
        address = f"{request.url.host}:{request.url.port}"
        self.calls.append(address)
        route = self.routes.get(address)
        if route is None:
            raise httpx.ConnectError("[Errno 111] Connection refused", request=request)
        return route(request)


@pytest.fixture
def network() -> FakePeerNetwork:
    return FakePeerNetwork()


@pytest.fixture
def mock_client(network: FakePeerNetwork) -> Generator[httpx.Client, None, None]:
    with httpx.Client(transport=httpx.MockTransport(network.handler)) as client:
        yield client


@pytest.fixture
def silent_port() -> Generator[int, None, None]:
    """A port that accepts TCP connections (via the listen backlog) but never answers."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(8)
    try:
        yield sock.getsockname()[1]
    finally:
        sock.close()


class _PongHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        body = b"pong"
        self.send_response(200)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args) -> None:
        pass


@pytest.fixture
def pong_port() -> Generator[int, None, None]:
    """A real HTTP server on loopback answering every GET with "pong"."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _PongHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server.server_address[1]
    finally:
        server.shutdown()
        server.server_close()
