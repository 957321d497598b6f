"""Entry point — `python -m newsletter` serves the API with uvicorn."""

import uvicorn

from newsletter.config import get_settings
from newsletter.infrastructure.observability import setup_logging
from newsletter.main import create_app


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
