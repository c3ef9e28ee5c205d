"""Run microservice-2: `python -m microservice_2`."""

import uvicorn

from .config import HOST, PORT


def main() -> None:
    uvicorn.run("microservice_2.main:app", host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    main()
