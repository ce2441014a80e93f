"""
Use case: List every user.

Input: none
Output: list[User]
Side effects: None (read-only query).
Failure cases: None beyond storage failures.
"""

import logging

from app.domain.users.entities import User
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Returns every stored user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> list[User]:
        users = self._user_repo.find_all()
        logger.info("Listed %d users", len(users))
        return users
