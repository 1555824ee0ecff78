"""Domain value objects for Roster."""

from roster.domain.value.identifiers import UserId
from roster.domain.value.types import (
    ABSENT,
    Absent,
    FieldChange,
    Present,
    UserEvent,
    UserOperation,
    UserUpdate,
)

__all__ = [
    # Identifiers
    "UserId",
    # Types
    "ABSENT",
    "Absent",
    "FieldChange",
    "Present",
    "UserEvent",
    "UserOperation",
    "UserUpdate",
]
