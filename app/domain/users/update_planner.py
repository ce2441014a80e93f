"""
Domain service: partial update planning.

Decides, for an existing user and a partial payload, whether the update
changes anything, whether the new email must be checked for uniqueness,
and which fields to write. Pure; the caller performs the write.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from app.domain.users.entities import User
from app.domain.users.errors import NoOpUpdateError, ValidationFailureError
from app.domain.users.validation import ValidationMode, ValidationResult, validate


@dataclass(frozen=True)
class UpdatePlan:
    """Fields to persist for an accepted update.

    Attributes:
        user_id: Id of the user being updated.
        changes: Only the fields present in the request; `created_at`
            never appears here.
        updated_at: Fresh modification timestamp.
        requires_email_check: True when the email changes and must be
            checked against other users before the write.
    """

    user_id: str
    changes: dict[str, str]
    updated_at: datetime
    requires_email_check: bool

    @property
    def fields(self) -> dict[str, Any]:
        """Column values to hand to the repository."""
        return {**self.changes, "updated_at": self.updated_at}


def plan_update(
    existing: User,
    payload: Mapping[str, Any],
    now: Optional[datetime] = None,
    validated: Optional[ValidationResult] = None,
) -> UpdatePlan:
    """Build the update plan for `existing`.

    Args:
        existing: Current snapshot of the stored user.
        payload: Raw partial update fields.
        now: Timestamp to stamp as `updated_at`. Defaults to current UTC.
        validated: Result of an earlier `validate(payload, UPDATE)` call.
            When given, the payload is not validated again.

    Returns:
        The plan describing what to write.

    Raises:
        ValidationFailureError: If the payload breaks any field rule.
        NoOpUpdateError: If every supplied field equals the stored value.
    """
    result = validated
    if result is None:
        result = validate(payload, ValidationMode.UPDATE)
    if not result.ok:
        raise ValidationFailureError(list(result.errors))

    changes = result.values
    if all(getattr(existing, name) == value for name, value in changes.items()):
        raise NoOpUpdateError(existing.id)

    requires_email_check = "email" in changes and changes["email"] != existing.email

    updated_at = now or datetime.now(timezone.utc)
    # Keep updated_at >= created_at even if clocks disagree.
    if updated_at < existing.created_at:
        updated_at = existing.created_at

    return UpdatePlan(
        user_id=existing.id,
        changes=dict(changes),
        updated_at=updated_at,
        requires_email_check=requires_email_check,
    )
