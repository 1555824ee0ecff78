"""Logging configuration for third-party libraries."""

import logging
import sys

from roster.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging.

    Application code logs through logfire; this routes output of libraries
    that use stdlib logging (kafka-python, uvicorn) to stdout.

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

    # kafka-python is chatty about broker reconnects
    logging.getLogger("kafka").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
