"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from roster.domain.model.user import User
from roster.domain.repository.user import UserRepository
from roster.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same unique-email rule as the database table.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_all(self) -> list[User]:
        """Find all users ordered by creation time."""
        return sorted(self._users.values(), key=lambda user: user.created_at)

    async def exists_by_email(self, email: str) -> bool:
        """Check whether any user has the given email."""
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user already has this email
        """
        for other in self._users.values():
            if other.id != user.id and other.email == user.email:
                raise IntegrityError("Duplicate email", None, Exception())

        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user by ID."""
        return self._users.pop(user_id, None) is not None
