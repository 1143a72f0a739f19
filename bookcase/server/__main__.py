"""Run the Bookcase server under uvicorn."""

import uvicorn

from bookcase.server.core.config import settings


def main() -> None:
    uvicorn.run(
        "bookcase.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
