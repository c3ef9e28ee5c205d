"""microservice-2 configuration.

microservice-2 is the "peer": it only answers `GET /hello`. Inside the
container network it is reached as "microservice-2:8082"; run directly on a
machine it listens on port 8082 as well, which is what microservice-1's
fallback address expects.
"""

from __future__ import annotations

import os

SERVICE_NAME: str = os.getenv("SERVICE_NAME", "Microservice 2")
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8082"))
