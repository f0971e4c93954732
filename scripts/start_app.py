#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from autoblog.config import Settings
from autoblog.util.logging import setup_logging
from autoblog.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting AutoBlog API",
            environment=settings.environment,
            port=settings.port,
        )

        uvicorn.run(
            "autoblog.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            # Replay protection and in-flight guards are held in process memory
            workers=1,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
