"""Domain value objects for Roster.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

from roster.domain.value.common import ValueObject

# Age bounds are inclusive on both ends
MIN_AGE = 1
MAX_AGE = 150

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_valid_email(value: str) -> bool:
    """Check that a string looks like an email address."""
    return bool(EMAIL_PATTERN.match(value))


def is_valid_age(value: int) -> bool:
    """Check that an age lies within the accepted range."""
    return MIN_AGE <= value <= MAX_AGE


class UserOperation(str, Enum):
    """Lifecycle operation announced on the user events topic."""

    CREATE = "CREATE"
    DELETE = "DELETE"


class UserEvent(ValueObject):
    """Event published when a user is created or deleted."""

    email: str
    operation: UserOperation


T = TypeVar("T")


class Absent:
    """Marker for a field that was not part of an update request."""

    _instance: Optional["Absent"] = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()


@dataclass(frozen=True)
class Present(Generic[T]):
    """A field explicitly supplied in an update request."""

    value: T


FieldChange = Union[Present[T], Absent]


def from_optional(value: Optional[T]) -> FieldChange[T]:
    """Convert a transport-level optional value into a tagged field change.

    ``None`` means the caller did not send the field.
    """
    if value is None:
        return ABSENT
    return Present(value)


@dataclass(frozen=True)
class UserUpdate:
    """Proposed changes to a user.

    Every field is either ``Present(value)`` or ``ABSENT``. Blank strings for
    name or email are kept as given; the reconciler treats them as
    "leave unchanged".
    """

    name: FieldChange[str] = ABSENT
    email: FieldChange[str] = ABSENT
    age: FieldChange[int] = ABSENT

    @classmethod
    def from_optionals(
        cls,
        name: Optional[str] = None,
        email: Optional[str] = None,
        age: Optional[int] = None,
    ) -> "UserUpdate":
        """Build an update where ``None`` marks an absent field."""
        return cls(
            name=from_optional(name),
            email=from_optional(email),
            age=from_optional(age),
        )

    @property
    def is_empty(self) -> bool:
        """Whether no field was supplied at all."""
        return not any(
            isinstance(change, Present) for change in (self.name, self.email, self.age)
        )
