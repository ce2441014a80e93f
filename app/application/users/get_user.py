"""
Use case: Fetch one user by id.

Input: GetUserQuery (user_id)
Output: User
Side effects: None (read-only query).
Failure cases: MalformedIdentifierError, UserNotFoundError.
"""

import logging

from app.application.users._identifiers import require_identifier
from app.application.users.dtos import GetUserQuery
from app.domain.users.entities import User
from app.domain.users.errors import UserNotFoundError
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Fetches a single user after checking the id layout."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: GetUserQuery) -> User:
        """Run the get user use case.

        Args:
            query: The lookup request.

        Returns:
            The stored user.

        Raises:
            MalformedIdentifierError: If the id is not a canonical UUID.
            UserNotFoundError: If no user has the id.
        """
        user_id = require_identifier(query.user_id)
        user = self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        logger.info("Fetched user id=%s", user_id)
        return user
