"""Create user use case."""

from typing import Any

import logfire
from pydantic import BaseModel, Field, field_validator

from roster.application.usecase.base import BaseUseCase
from roster.domain.service import UserService
from roster.domain.value.types import (
    EMAIL_MAX_LENGTH,
    MAX_AGE,
    MIN_AGE,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    is_valid_email,
)

from .response import UserResponse


class CreateUserRequest(BaseModel):
    """Create user request."""

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: str = Field(min_length=1, max_length=EMAIL_MAX_LENGTH)
    age: int = Field(ge=MIN_AGE, le=MAX_AGE, strict=True)

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Any) -> Any:
        """Trim surrounding whitespace before length checks."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email format."""
        if not is_valid_email(v):
            raise ValueError("Email must be a valid address")
        return v


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a new user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Execute create user flow.

        Args:
            request: Validated user fields

        Returns:
            The created user

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        with logfire.span("create_user.execute", email=request.email):
            user = await self.user_service.create_user(
                name=request.name,
                email=request.email,
                age=request.age,
            )
            return UserResponse.from_user(user)
