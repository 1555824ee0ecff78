"""Domain model entities for Roster."""

from roster.domain.model.user import User

__all__ = [
    "User",
]
