"""microservice-1 configuration.

microservice-1 is the "caller":
- It answers `GET /hello` itself.
- It calls microservice-2 on `GET /call-peer`.

The peer has two addresses. The primary is the name used inside the
container network; the fallback is where the peer lives when both services
run directly on one machine. Override either with environment variables.
"""

from __future__ import annotations

import os

# --- This service ------------------------------------------------------------
SERVICE_NAME: str = os.getenv("SERVICE_NAME", "Microservice 1")
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8081"))

# --- Peer (microservice-2) ---------------------------------------------------
PEER_NAME: str = os.getenv("PEER_NAME", "microservice-2")

# "host:port". In Docker / Kubernetes "microservice-2" is the hostname.
PEER_PRIMARY_ADDRESS: str = os.getenv("PEER_PRIMARY_ADDRESS", "microservice-2:8082")

# "host:port". Used when the primary can't be reached (e.g. testing locally).
PEER_FALLBACK_ADDRESS: str = os.getenv("PEER_FALLBACK_ADDRESS", "localhost:8082")

PEER_PATH: str = os.getenv("PEER_PATH", "/hello")

# Per-attempt timeout. A call takes at most 2x this before reporting failure.
PEER_TIMEOUT_SECONDS: float = float(os.getenv("PEER_TIMEOUT_SECONDS", "5.0"))
