"""Run the query API with uvicorn: `python -m src.api`."""

from __future__ import annotations

import uvicorn

from src.api.api_config import get_api_config


def main() -> None:
    config = get_api_config()
    uvicorn.run("src.api.app:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
