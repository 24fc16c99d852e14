"""Run the API with uvicorn on the configured host/port."""

from __future__ import annotations

import logging

import uvicorn

from movie_api.core.config import get_settings
from movie_api.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def run() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info("API listening on http://%s:%s", settings.host, settings.port)
    uvicorn.run("movie_api.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
