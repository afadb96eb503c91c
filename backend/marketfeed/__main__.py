"""Run the API server: ``python -m marketfeed``."""

import uvicorn

from marketfeed.config import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run("marketfeed.main:create_app", factory=True, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
