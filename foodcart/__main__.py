"""Run the API with uvicorn: python -m foodcart"""

import logging

import uvicorn

from foodcart.app import create_app
from foodcart.core.config import get_settings
from foodcart.core.errors import StartupError
from foodcart.core.logs import configure_logging

logger = logging.getLogger("foodcart")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        app = create_app(settings)
    except StartupError as exc:
        logger.error("Failed to start server: %s", exc)
        raise SystemExit(1)
    logger.info("Server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
