"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from roster.domain.model import User
from roster.domain.value import UserId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    name: str = "Ivan Petrov",
    email: str = "ivan@example.com",
    age: int = 25,
    created_at: datetime | None = None,
) -> User:
    """Helper function to build a valid user for tests.

    Args:
        name: Display name
        email: Email address
        age: Age in years
        created_at: Creation time, now if omitted

    Returns:
        User domain model with a fresh ID
    """
    return User(
        id=UserId(uuid4()),
        name=name,
        email=email,
        age=age,
        created_at=created_at or datetime.now(),
    )


def make_users(count: int, start: datetime | None = None) -> list[User]:
    """Build users with distinct emails and increasing creation times."""
    start = start or datetime(2024, 1, 1, 12, 0, 0)
    return [
        make_user(
            name=f"User {i}",
            email=f"user{i}@example.com",
            age=20 + i,
            created_at=start + timedelta(minutes=i),
        )
        for i in range(count)
    ]
