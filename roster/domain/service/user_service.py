"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from roster.domain.error import DuplicateEmailError, NotFoundError
from roster.domain.model import User
from roster.domain.repository import UserRepository
from roster.domain.value import UserId, UserUpdate

from .base import Service
from .event_service import UserEventService
from .reconciliation import UserReconciler


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        reconciler: UserReconciler,
        event_service: UserEventService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            reconciler: Update reconciliation engine
            event_service: User event publisher
        """
        self.user_repository = user_repository
        self.reconciler = reconciler
        self.event_service = event_service

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id), email=user.email)
            return user

    async def list_users(self) -> list[User]:
        """List all users, oldest first."""
        with logfire.span("user_service.list_users"):
            users = await self.user_repository.find_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def create_user(self, name: str, email: str, age: int) -> User:
        """Create a new user.

        The email pre-check gives a friendly error; the storage unique
        constraint catches creations that race past it.

        The CREATE event goes out once the insert has been flushed, which is
        before the surrounding request scope commits. A commit that fails
        after the flush leaves the event without a stored user.

        Args:
            name: Display name
            email: Email address, must not belong to any user
            age: Age in years

        Returns:
            Created user

        Raises:
            DuplicateEmailError: If the email is already taken
        """
        with logfire.span("user_service.create_user", email=email):
            if await self.user_repository.exists_by_email(email):
                logfire.warn("Duplicate email on create", email=email)
                raise DuplicateEmailError(email)

            user = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                age=age,
                created_at=datetime.now(),
            )
            saved = await self._save(user)
            logfire.info("User created", user_id=str(saved.id), email=saved.email)

            await self.event_service.user_created(saved)
            return saved

    async def update_user(self, user_id: UserId, update: UserUpdate) -> User:
        """Apply a partial update to a user.

        Writes only when reconciliation reports a change.

        Args:
            user_id: User ID
            update: Proposed field changes

        Returns:
            The current state of the user after the update

        Raises:
            NotFoundError: If user not found
            DuplicateEmailError: If the new email belongs to another user
            InvalidAgeError: If the new age is out of range
        """
        with logfire.span("user_service.update_user", user_id=str(user_id)):
            existing = await self.get_by_id(user_id)
            result = await self.reconciler.reconcile(existing, update)

            if not result.changed:
                logfire.info("Update is a no-op", user_id=str(user_id))
                return result.user

            saved = await self._save(result.user)
            logfire.info("User updated", user_id=str(user_id))
            return saved

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user and announce the deletion.

        Args:
            user_id: User ID

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            deleted = await self.user_repository.delete(user_id)
            if not deleted:
                # Removed by someone else between lookup and delete
                logfire.warn("User vanished before delete", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            logfire.info("User deleted", user_id=str(user_id), email=user.email)
            await self.event_service.user_deleted(user)

    async def _save(self, user: User) -> User:
        """Persist a user, translating unique-email violations."""
        try:
            return await self.user_repository.save(user)
        except IntegrityError:
            logfire.warn(
                "Unique email constraint violated",
                user_id=str(user.id),
                email=user.email,
            )
            raise DuplicateEmailError(user.email)
