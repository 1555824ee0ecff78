"""User response shared by user use cases."""

from datetime import datetime

from pydantic import BaseModel

from roster.domain.model import User


class UserResponse(BaseModel):
    """Public representation of a user."""

    user_id: str
    name: str
    email: str
    age: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build a response from a domain user."""
        return cls(
            user_id=str(user.id),
            name=user.name,
            email=user.email,
            age=user.age,
            created_at=user.created_at,
        )
