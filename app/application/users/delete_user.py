"""
Use case: Delete one user.

Input: DeleteUserCommand (user_id)
Output: None
Side effects: Permanently removes one row from the user store.
Failure cases: MalformedIdentifierError, UserNotFoundError.
"""

import logging

from app.application.users._identifiers import require_identifier
from app.application.users.dtos import DeleteUserCommand
from app.domain.users.errors import UserNotFoundError
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Deletes a single user after checking it exists."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: DeleteUserCommand) -> None:
        user_id = require_identifier(command.user_id)
        if self._user_repo.find_by_id(user_id) is None:
            raise UserNotFoundError(user_id)
        self._user_repo.delete(user_id)
        logger.info("Deleted user id=%s", user_id)
