"""Async engine and session factory."""

from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from roster.config import DatabaseSettings, Settings


def _pool_options(database: DatabaseSettings) -> dict[str, Any]:
    """Pool sizing for server databases; SQLite keeps its default pool."""
    if make_url(database.url).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_size": database.pool_size,
        "max_overflow": database.max_overflow,
        "pool_pre_ping": True,  # Drop connections the server has closed
    }


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for ``settings.database.url``.

    SQL statements are echoed when ``settings.debug`` is set.
    """
    return create_async_engine(
        settings.database.url,
        echo=settings.debug,
        **_pool_options(settings.database),
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for one session per request or command.

    Sessions neither autoflush nor expire loaded rows on commit; repositories
    flush explicitly.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
