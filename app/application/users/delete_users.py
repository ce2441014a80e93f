"""
Use case: Delete many users at once.

Input: DeleteUsersCommand (ids)
Output: DeleteUsersResult
Side effects: Permanently removes the discovered users.
Failure cases: InvalidBatchRequestError, NoMatchingUsersError.
"""

import logging

from app.application.users.dtos import DeleteUsersCommand, DeleteUsersResult
from app.domain.users.batch_delete import BatchDeleteResolver
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class DeleteUsersUseCase:
    """Resolves a batch of ids and deletes the users that exist.

    Resolution (format gate, existence lookup, missing-id policy) is
    owned by BatchDeleteResolver; this class only performs the delete.
    """

    def __init__(
        self, user_repo: UserRepository, resolver: BatchDeleteResolver
    ) -> None:
        self._user_repo = user_repo
        self._resolver = resolver

    def execute(self, command: DeleteUsersCommand) -> DeleteUsersResult:
        batch = self._resolver.resolve(command.ids)
        deleted = self._user_repo.delete_many(batch.existing)
        logger.info(
            "Batch deleted %d users (%d requested, %d skipped)",
            deleted,
            len(batch.requested),
            len(batch.missing),
        )
        return DeleteUsersResult(
            deleted_count=deleted,
            deleted_ids=sorted(batch.existing),
            skipped_ids=list(batch.missing),
        )
