import logging

from movie_api.core.logging_config import configure_logging
from movie_api.main import app

# Serverless functions never call movie_api.server.run, so set logging up here
configure_logging()
logger = logging.getLogger(__name__)

logger.info("Vercel api/index.py initialized")

# This is the entry point for Vercel Serverless Functions
# It exports the FastAPI app instance
__all__ = ["app"]
