"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for fetching one user.

    Attributes:
        user_id: Raw id taken from the request path.
    """

    user_id: str


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Fields are kept raw; validation happens in the use case.
    """

    name: Any = None
    email: Any = None
    password: Any = None


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for a partial user update.

    Attributes:
        user_id: Raw id taken from the request path.
        payload: Only the fields the client sent.
    """

    user_id: str
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteUserCommand:
    """Input DTO for deleting one user."""

    user_id: str


@dataclass(frozen=True)
class DeleteUsersCommand:
    """Input DTO for deleting many users.

    Attributes:
        ids: Raw `ids` value from the request body; may be malformed.
    """

    ids: Any = None


@dataclass(frozen=True)
class DeleteUsersResult:
    """Output DTO for a batch delete.

    Attributes:
        deleted_count: Rows removed by the store.
        deleted_ids: Ids that existed and were deleted, sorted.
        skipped_ids: Well-formed ids that matched no user.
    """

    deleted_count: int
    deleted_ids: list[str]
    skipped_ids: list[str]
