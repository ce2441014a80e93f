"""
Use case: Create a user.

Input: CreateUserCommand (name, email, password)
Output: User
Side effects: Inserts one row in the user store.
Failure cases: ValidationFailureError, DuplicateEmailError.
"""

import logging
from dataclasses import asdict

from app.application.users.dtos import CreateUserCommand
from app.domain.users.entities import User
from app.domain.users.errors import DuplicateEmailError, ValidationFailureError
from app.domain.users.ports import UserRepository
from app.domain.users.validation import ValidationMode, validate

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Validates a new user, checks email uniqueness, then stores it."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: CreateUserCommand) -> User:
        """Run the create user use case.

        Args:
            command: Raw fields of the new user.

        Returns:
            The stored user.

        Raises:
            ValidationFailureError: If any field rule is broken.
            DuplicateEmailError: If the email already belongs to a user.
        """
        result = validate(asdict(command), ValidationMode.CREATE)
        if not result.ok:
            raise ValidationFailureError(list(result.errors))

        email = result.values["email"]
        if self._user_repo.find_by_email(email) is not None:
            raise DuplicateEmailError(email)

        user = self._user_repo.create(result.values)
        logger.info("Created user id=%s", user.id)
        return user
