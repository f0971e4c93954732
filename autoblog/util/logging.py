"""Logging configuration for the application."""

import logging
import sys

from autoblog.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging used by the route modules.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Third-party clients are chatty at INFO
    for noisy in ("httpx", "httpcore", "google_genai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("autoblog").setLevel(level)

    logging.getLogger(__name__).info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )
