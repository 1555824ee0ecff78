"""Row <-> domain model mapping for the users table.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through the ORM.
"""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from roster.domain.model import User
from roster.domain.value import UserId


def row_to_user(row: Mapping[str, Any]) -> User:
    """Build a ``User`` from a ``users`` row mapping.

    Some drivers return the id as text; it is normalized to ``UUID``.
    """
    raw_id = row["id"]
    return User(
        id=UserId(raw_id if isinstance(raw_id, UUID) else UUID(str(raw_id))),
        name=row["name"],
        email=row["email"],
        age=row["age"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> dict[str, Any]:
    """Column values for inserting or updating ``user``."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "age": user.age,
        "created_at": user.created_at,
    }
