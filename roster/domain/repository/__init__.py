"""Repository interfaces for Roster domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from roster.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
]
