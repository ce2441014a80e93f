"""Test data builders shared across the users test modules."""

from datetime import datetime, timezone

from app.domain.users.entities import User

USER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_ID = "22222222-2222-2222-2222-222222222222"
CREATED_AT = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_user(
    user_id: str = USER_ID,
    name: str = "Jane Doe",
    email: str = "jane@gmail.com",
    password: str = "longenough",
) -> User:
    """Build a stored-user snapshot with fixed timestamps."""
    return User(
        id=user_id,
        name=name,
        email=email,
        password=password,
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )
