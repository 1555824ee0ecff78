"""In-memory repository implementations for testing."""

from .user import InMemoryUserRepository

__all__ = [
    "InMemoryUserRepository",
]
