"""Run microservice-1: `python -m microservice_1`."""

import uvicorn

from .config import HOST, PORT


def main() -> None:
    uvicorn.run("microservice_1.main:app", host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    main()
