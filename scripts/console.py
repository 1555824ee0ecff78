#!/usr/bin/env python3
"""Run the interactive user management console."""

import asyncio
import sys

import logfire

from roster.config import Settings
from roster.interface.console.menu import ConsoleMenu
from roster.util.di.container import create_container
from roster.util.logging import setup_logging
from roster.util.observability import configure_logfire


async def run_console() -> None:
    """Run the menu loop, closing the container (engine, producer) at exit."""
    container = create_container()
    try:
        await ConsoleMenu(container).run()
    finally:
        await container.close()


def main() -> int:
    """Start the console and log fatal errors to Logfire."""
    settings = Settings()

    configure_logfire(settings, service_name="roster-console")
    setup_logging(settings)

    try:
        asyncio.run(run_console())
        return 0
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        logfire.error(
            "Console failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
