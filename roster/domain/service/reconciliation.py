"""User update reconciliation.

Merges a partial update into a stored user, field by field, enforcing email
uniqueness and the age range, and reports whether anything actually changed.
"""

from dataclasses import dataclass
from typing import Any

import logfire

from roster.domain.error import DuplicateEmailError, InvalidAgeError
from roster.domain.model import User
from roster.domain.repository import UserRepository
from roster.domain.value import FieldChange, Present, UserUpdate
from roster.domain.value.types import MAX_AGE, MIN_AGE, is_valid_age

from .base import Service


@dataclass
class ReconciliationResult:
    """Outcome of reconciling an update against a stored user.

    When ``changed`` is False, ``user`` is the original record and no write
    is needed.
    """

    user: User
    changed: bool


def _trimmed(change: FieldChange[str]) -> str | None:
    """Return the trimmed text of a present, non-blank field, else None."""
    if not isinstance(change, Present):
        return None
    value = change.value.strip()
    return value or None


class UserReconciler(Service):
    """Computes the new state of a user from a partial update.

    Only reads from the repository (email lookup); persisting the result is
    the caller's decision.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize reconciler.

        Args:
            user_repository: User repository used for uniqueness lookups
        """
        self.user_repository = user_repository

    async def reconcile(
        self, existing: User, proposed: UserUpdate
    ) -> ReconciliationResult:
        """Reconcile a proposed update with the stored user.

        Fields are processed in order name, email, age. Blank or absent
        name/email and an absent or equal age leave the field unchanged.

        Args:
            existing: Current persisted user
            proposed: Proposed field changes

        Returns:
            Reconciliation result with the new user state and a changed flag

        Raises:
            DuplicateEmailError: If the new email belongs to another user
            InvalidAgeError: If the new age is outside the accepted range
        """
        with logfire.span("user_reconciler.reconcile", user_id=str(existing.id)):
            if proposed.is_empty:
                logfire.info("Empty update", user_id=str(existing.id))
                return ReconciliationResult(user=existing, changed=False)

            changes: dict[str, Any] = {}

            name = _trimmed(proposed.name)
            if name is not None and name != existing.name:
                changes["name"] = name

            email = _trimmed(proposed.email)
            if email is not None and email != existing.email:
                owner = await self.user_repository.find_by_email(email)
                if owner is not None and owner.id != existing.id:
                    logfire.warn(
                        "Email already taken",
                        user_id=str(existing.id),
                        owner_id=str(owner.id),
                        email=email,
                    )
                    raise DuplicateEmailError(email)
                changes["email"] = email

            if isinstance(proposed.age, Present) and proposed.age.value != existing.age:
                age = proposed.age.value
                if not is_valid_age(age):
                    logfire.warn("Age out of range", user_id=str(existing.id), age=age)
                    raise InvalidAgeError(age, MIN_AGE, MAX_AGE)
                changes["age"] = age

            if not changes:
                logfire.info("No changes to apply", user_id=str(existing.id))
                return ReconciliationResult(user=existing, changed=False)

            # Immutable model: the stored instance is never touched
            updated = existing.model_copy(update=changes)
            logfire.info(
                "User reconciled",
                user_id=str(existing.id),
                fields=sorted(changes),
            )
            return ReconciliationResult(user=updated, changed=True)
