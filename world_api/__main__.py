# world_api/__main__.py
# python -m world_api

import uvicorn

from world_api.core.config import settings


def main() -> None:
    uvicorn.run(
        "world_api.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_config=None,    # keep the handlers set up by world_api.core.logging
    )


if __name__ == "__main__":
    main()
