"""Update user use case."""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel, Field, field_validator

from roster.application.usecase.base import BaseUseCase
from roster.domain.service import UserService
from roster.domain.value import UserId, UserUpdate
from roster.domain.value.types import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    is_valid_email,
)

from .response import UserResponse


class UserFieldsUpdate(BaseModel):
    """Optional user fields of an update.

    ``None`` leaves a field unchanged, and so does a blank name or email.
    """

    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LENGTH)
    age: int | None = Field(default=None, strict=True)

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Any) -> Any:
        """Trim surrounding whitespace before length checks."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        """Reject names that are too short; blank means unchanged."""
        if v and len(v) < NAME_MIN_LENGTH:
            raise ValueError(
                f"Name must be {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} characters"
            )
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        """Reject malformed emails; blank means unchanged."""
        if v and not is_valid_email(v):
            raise ValueError("Email must be a valid address")
        return v


class UpdateUserRequest(UserFieldsUpdate):
    """Update user request.

    Age range is checked by the reconciler, not here.
    """

    user_id: UUID

    def to_update(self) -> UserUpdate:
        """Convert to domain update with explicit absent fields."""
        return UserUpdate.from_optionals(name=self.name, email=self.email, age=self.age)


class UpdateUserUseCase(BaseUseCase):
    """Use case for partially updating a user.

    Only changed fields are written; an update that changes nothing
    performs no write at all.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserResponse:
        """Execute update user flow.

        Steps:
        1. Look up the user
        2. Reconcile proposed fields with the stored record
        3. Save if anything changed

        Args:
            request: Request with user ID and optional fields

        Returns:
            Current state of the user

        Raises:
            NotFoundError: If user not found
            DuplicateEmailError: If the new email belongs to another user
            InvalidAgeError: If the new age is out of range
        """
        with logfire.span("update_user.execute", user_id=str(request.user_id)):
            user = await self.user_service.update_user(
                UserId(request.user_id), request.to_update()
            )
            return UserResponse.from_user(user)
