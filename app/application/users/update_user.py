"""
Use case: Partially update a user.

Input: UpdateUserCommand (user_id, payload)
Output: User
Side effects: Updates one row in the user store.
Failure cases (in priority order): MalformedIdentifierError,
    ValidationFailureError, UserNotFoundError, DuplicateEmailError,
    NoOpUpdateError.
"""

import logging

from app.application.users._identifiers import require_identifier
from app.application.users.dtos import UpdateUserCommand
from app.domain.users.entities import User
from app.domain.users.errors import (
    DuplicateEmailError,
    UserNotFoundError,
    ValidationFailureError,
)
from app.domain.users.ports import UserRepository
from app.domain.users.update_planner import plan_update
from app.domain.users.validation import ValidationMode, validate

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Orchestrates a partial update.

    The payload is validated before the user is loaded so that a bad
    payload is reported ahead of a missing user. Planning (no-op
    detection, field selection) is delegated to the domain planner.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: UpdateUserCommand) -> User:
        user_id = require_identifier(command.user_id)

        # Validate before the lookup: a bad payload outranks a missing user.
        result = validate(command.payload, ValidationMode.UPDATE)
        if not result.ok:
            raise ValidationFailureError(list(result.errors))

        existing = self._user_repo.find_by_id(user_id)
        if existing is None:
            raise UserNotFoundError(user_id)

        plan = plan_update(existing, command.payload, validated=result)

        if plan.requires_email_check:
            owner = self._user_repo.find_by_email(plan.changes["email"])
            if owner is not None and owner.id != user_id:
                raise DuplicateEmailError(plan.changes["email"])

        user = self._user_repo.update(user_id, plan.fields)
        logger.info(
            "Updated user id=%s fields=%s", user_id, ",".join(sorted(plan.changes))
        )
        return user
