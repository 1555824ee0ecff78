#!/usr/bin/env python3
"""Apply Alembic migrations to the users database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c2a9d7e10
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from roster.config import Settings
from roster.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the schema to the requested revision."""
    settings = Settings()
    configure_logfire(settings, service_name="roster-migrations")

    revision = argv[0] if argv else "head"

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            # env.py reads the database URL from Settings
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail loudly so the service does not start on a stale schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
