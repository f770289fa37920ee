"""Main application entry point."""

import logging

import uvicorn
from dotenv import load_dotenv

from debt_tracker.config import get_settings
from debt_tracker.services.db import init_db
from debt_tracker.services.logging import setup_server_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Load .env, configure logging and serve the API."""
    load_dotenv()
    setup_server_logging()
    settings = get_settings()

    # Alembic owns the schema in deployments; this only fills a fresh dev database
    init_db()

    logger.info("Starting debt tracker API on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "debt_tracker.api.app:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
