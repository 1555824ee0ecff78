"""PostgreSQL repository implementations."""

from roster.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
]
