"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from roster.domain.model.user import User
from roster.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer and must enforce
    uniqueness of ``email``.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email (exact match).

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Find all users, oldest first.

        Returns:
            List of users ordered by creation time
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether any user has the given email.

        Args:
            email: Email to look for

        Returns:
            True if a user with this email exists
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If another user already has this email
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if a user was deleted, False if none existed
        """
        pass
