#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from autoblog.config import Settings
from autoblog.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database to the latest revision."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The API must not start against a half-migrated schema
            raise

    logfire.info("Database is at head revision")
    return 0


if __name__ == "__main__":
    sys.exit(main())
