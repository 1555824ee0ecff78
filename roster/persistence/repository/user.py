"""SQLAlchemy implementation of the user repository."""

from typing import Optional

import logfire
from sqlalchemy import Select, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.model import User
from roster.domain.repository import UserRepository
from roster.domain.value import UserId
from roster.persistence.mappers import row_to_user, user_to_dict
from roster.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """User repository on the ``users`` table.

    Written against SQLAlchemy Core only, so it also runs on SQLite.
    The ``uq_users_email`` constraint backs the unique-email rule.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Request-scoped async session; commits are left to its owner
        """
        self.session = session

    async def _first(self, stmt: Select) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._first(select(users_table).where(users_table.c.id == user_id))

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find the user with exactly this email (case-sensitive)."""
        return await self._first(
            select(users_table).where(users_table.c.email == email)
        )

    async def find_all(self) -> list[User]:
        """All users, oldest first; ties broken by id for a stable order."""
        stmt = select(users_table).order_by(
            users_table.c.created_at, users_table.c.id
        )
        result = await self.session.execute(stmt)
        return [row_to_user(row) for row in result.mappings()]

    async def exists_by_email(self, email: str) -> bool:
        result = await self.session.execute(
            select(exists().where(users_table.c.email == email))
        )
        return bool(result.scalar())

    async def save(self, user: User) -> User:
        """Insert a new user or update an existing one.

        Raises:
            IntegrityError: If another user already has this email. The
                session is rolled back before the error is re-raised.
        """
        values = user_to_dict(user)

        if await self.find_by_id(user.id) is None:
            stmt = users_table.insert().values(**values)
        else:
            # id and created_at are immutable
            del values["id"], values["created_at"]
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**values)
            )

        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            logfire.warn(
                "User write rejected by constraint",
                user_id=str(user.id),
                email=user.email,
                error=str(e.orig),
            )
            await self.session.rollback()
            raise

        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user; False when no row matched."""
        result = await self.session.execute(
            users_table.delete().where(users_table.c.id == user_id)
        )
        await self.session.flush()
        return result.rowcount > 0
