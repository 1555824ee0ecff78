"""Strongly typed identifiers for Roster domain entities.

Using NewType for strong typing keeps user IDs from being mixed up with
arbitrary UUIDs and makes signatures self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
