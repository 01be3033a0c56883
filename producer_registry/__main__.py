"""Run the API with uvicorn: ``python -m producer_registry``.

Host and port come from settings (HOST, PORT; defaults 0.0.0.0 and 3001).
"""

import uvicorn

from producer_registry.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "producer_registry.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
