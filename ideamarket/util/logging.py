"""Logging configuration for the application."""

import logging
import sys

from ideamarket.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for uvicorn and other third-party loggers.

    Application code logs through logfire; this only sets levels and format
    for everything else.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # uvicorn access lines duplicate the logfire request spans
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    # Our application loggers stay at the configured level
    logging.getLogger("ideamarket").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
