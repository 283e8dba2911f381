"""
Run the API server:

  python -m app

Listens on HOST:PORT from the environment (default 0.0.0.0:3000).
"""

import logging

import uvicorn

from app.core.config import get_settings
from app.main import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    logger.info("Starting server on %s:%s (env=%s)", settings.HOST, settings.PORT, settings.APP_ENV)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level="debug" if settings.DEBUG else "info")


if __name__ == "__main__":
    main()
