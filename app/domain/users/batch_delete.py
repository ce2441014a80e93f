"""
Domain service: batch delete resolution.

Turns a client-supplied list of ids into the set of users to delete.

Protocol:
    1. The request must be a non-empty list of strings.
    2. Every id must have the canonical layout; one bad id rejects
       the whole batch before any lookup.
    3. Existence is resolved in one query over the whole set.
    4. If nothing exists the batch is a not-found condition.

Ids that pass the format check but match no stored user are handled
by MissingIdPolicy. The default, DROP, deletes the discovered subset
and leaves the rest unreported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.domain.users.errors import InvalidBatchRequestError, NoMatchingUsersError
from app.domain.users.identifiers import is_valid_identifier, normalize_identifier
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request. Provide an array of user IDs."
INVALID_IDS = "Invalid user IDs"


class MissingIdPolicy(Enum):
    """What to do with well-formed ids that match no stored user."""

    DROP = "drop"
    REJECT = "reject"


@dataclass(frozen=True)
class ResolvedBatch:
    """Result of resolving a batch delete request.

    Attributes:
        requested: Normalised ids in request order, duplicates removed.
        existing: Ids of stored users. This is the deletion set.
        missing: Requested ids with no stored user, in request order.
    """

    requested: tuple[str, ...]
    existing: frozenset[str]
    missing: tuple[str, ...]


class BatchDeleteResolver:
    """Validates and resolves a batch of user ids against storage."""

    def __init__(
        self,
        user_repo: UserRepository,
        missing_policy: MissingIdPolicy = MissingIdPolicy.DROP,
    ) -> None:
        self._user_repo = user_repo
        self._missing_policy = missing_policy

    def resolve(self, ids: Any) -> ResolvedBatch:
        """Resolve `ids` into the authoritative deletion set.

        Raises:
            InvalidBatchRequestError: If `ids` is not a non-empty list, or
                any element is not a canonical identifier.
            NoMatchingUsersError: If no requested user exists, or some are
                missing under MissingIdPolicy.REJECT.
        """
        if not isinstance(ids, (list, tuple)) or not ids:
            raise InvalidBatchRequestError(INVALID_REQUEST)

        valid = [user_id for user_id in ids if is_valid_identifier(user_id)]
        if len(valid) != len(ids):
            logger.warning(
                "Rejected batch: %d of %d ids malformed", len(ids) - len(valid), len(ids)
            )
            raise InvalidBatchRequestError(INVALID_IDS)

        requested = tuple(dict.fromkeys(normalize_identifier(i) for i in valid))
        found = self._user_repo.find_many_by_id(set(requested))
        existing = frozenset(user.id for user in found)

        if not existing:
            raise NoMatchingUsersError()

        missing = tuple(user_id for user_id in requested if user_id not in existing)
        if missing and self._missing_policy is MissingIdPolicy.REJECT:
            raise NoMatchingUsersError(missing)

        if missing:
            logger.info("Dropping %d unknown ids from batch delete", len(missing))

        return ResolvedBatch(requested=requested, existing=existing, missing=missing)
