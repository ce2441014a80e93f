"""
Pydantic schemas for the users API.

Every response, success or error, uses the envelope
`{status, message, data?}`. Request schemas only describe shape;
field rules (name pattern, email domains, password length) are
enforced by the domain validator so that all violations are reported
together in one message.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

NAME_DESCRIPTION = "Letters, spaces, hyphens and apostrophes only"
EMAIL_DESCRIPTION = "Email address on an accepted domain, e.g. gmail.com"
PASSWORD_DESCRIPTION = "At least 8 characters"


class CreateUserRequest(BaseModel):
    """Request schema for creating a user. All fields are required."""

    name: Optional[str] = Field(default=None, description=NAME_DESCRIPTION)
    email: Optional[str] = Field(default=None, description=EMAIL_DESCRIPTION)
    password: Optional[str] = Field(default=None, description=PASSWORD_DESCRIPTION)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@gmail.com",
                "password": "longenough",
            }
        }
    )


class UpdateUserRequest(BaseModel):
    """Request schema for a partial update. At least one field is required."""

    name: Optional[str] = Field(default=None, description=NAME_DESCRIPTION)
    email: Optional[str] = Field(default=None, description=EMAIL_DESCRIPTION)
    password: Optional[str] = Field(default=None, description=PASSWORD_DESCRIPTION)


class DeleteUsersRequest(BaseModel):
    """Request schema for deleting many users.

    `ids` is accepted as-is so that a missing or non-array value is
    reported with the batch delete error message.
    """

    ids: Any = Field(
        default=None,
        description="Array of user UUIDs to delete",
        json_schema_extra={"type": "array", "items": {"type": "string", "format": "uuid"}},
    )


class UserItem(BaseModel):
    """Public view of a user. The password is never exposed."""

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class UserResponse(BaseModel):
    """Envelope carrying a single user."""

    status: int
    message: str
    data: UserItem


class UserListResponse(BaseModel):
    """Envelope carrying every user."""

    status: int
    message: str
    data: list[UserItem]


class DeleteUsersData(BaseModel):
    """Outcome of a batch delete."""

    deleted_count: int
    deleted_ids: list[str]
    skipped_ids: list[str]


class DeleteUsersResponse(BaseModel):
    """Envelope for a batch delete."""

    status: int
    message: str
    data: DeleteUsersData


class MessageResponse(BaseModel):
    """Envelope with a message and no payload."""

    status: int
    message: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned by all error handlers."""

    status: int
    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
