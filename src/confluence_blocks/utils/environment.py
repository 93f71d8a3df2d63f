"""Utility functions related to environment checking."""

import logging
import os

logger = logging.getLogger("confluence-blocks.utils.environment")


def get_available_services() -> dict[str, bool]:
    """Determine which services are available based on environment variables."""
    confluence_is_setup = all(
        [
            os.getenv("CONFLUENCE_URL"),
            os.getenv("CONFLUENCE_USERNAME"),
            os.getenv("CONFLUENCE_API_TOKEN"),
        ]
    )

    if confluence_is_setup:
        logger.info("Using Confluence Cloud Basic Authentication (API Token)")
    else:
        logger.info(
            "Confluence is not configured or required environment variables are missing."
        )

    return {"confluence": confluence_is_setup}
