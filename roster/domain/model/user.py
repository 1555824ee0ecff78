"""User aggregate root."""

from datetime import datetime

from pydantic import Field, field_validator

from roster.domain.model.common import DomainModel
from roster.domain.value import UserId
from roster.domain.value.types import (
    EMAIL_MAX_LENGTH,
    MAX_AGE,
    MIN_AGE,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    is_valid_email,
)


class User(DomainModel):
    """User aggregate root.

    The email is unique across all users. Changes are made by producing a
    new instance (``model_copy``), never by mutating a stored one.
    """

    id: UserId
    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH)
    age: int = Field(ge=MIN_AGE, le=MAX_AGE)
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate email looks like an address."""
        if not is_valid_email(v):
            raise ValueError("Email must be a valid address")
        return v
