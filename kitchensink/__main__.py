"""Run the application with uvicorn: ``python -m kitchensink``."""

import uvicorn

from kitchensink.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "kitchensink.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
