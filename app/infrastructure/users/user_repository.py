"""
Adapter: User repository.

Implements the UserRepository port on top of a SQLAlchemy engine.
Each method runs in its own connection; writes run in a transaction.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError

from app.domain.users.entities import User
from app.domain.users.errors import DuplicateEmailError, UserNotFoundError
from app.domain.users.ports import UserRepository
from app.infrastructure.users.schema import users

logger = logging.getLogger(__name__)

WRITABLE_COLUMNS = ("name", "email", "password", "updated_at")


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_entity(row: Row) -> User:
    return User(
        id=row.id,
        name=row.name,
        email=row.email,
        password=row.password,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


class SqlUserRepository(UserRepository):
    """Relational implementation of the user repository.

    Works with any SQLAlchemy dialect; PostgreSQL in production,
    SQLite for local development and tests.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_all(self) -> list[User]:
        query = select(users).order_by(users.c.created_at, users.c.id)
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_to_entity(row) for row in rows]

    def find_by_id(self, user_id: str) -> Optional[User]:
        query = select(users).where(users.c.id == user_id.lower())
        with self._engine.connect() as conn:
            row = conn.execute(query).first()
        return _to_entity(row) if row is not None else None

    def find_by_email(self, email: str) -> Optional[User]:
        query = select(users).where(users.c.email == email)
        with self._engine.connect() as conn:
            row = conn.execute(query).first()
        return _to_entity(row) if row is not None else None

    def find_many_by_id(self, user_ids: Iterable[str]) -> list[User]:
        ids = sorted({user_id.lower() for user_id in user_ids})
        if not ids:
            return []
        query = select(users).where(users.c.id.in_(ids))
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_to_entity(row) for row in rows]

    def create(self, fields: dict[str, Any]) -> User:
        """Insert a user with a fresh UUID and matching timestamps.

        Args:
            fields: name, email and password.

        Returns:
            The stored user; `created_at` equals `updated_at`.

        Raises:
            DuplicateEmailError: If the email is already stored.
        """
        now = datetime.now(timezone.utc)
        values = {
            "id": str(uuid4()),
            "name": fields["name"],
            "email": fields["email"],
            "password": fields["password"],
            "created_at": now,
            "updated_at": now,
        }
        try:
            with self._engine.begin() as conn:
                conn.execute(insert(users).values(**values))
        except IntegrityError as exc:
            logger.warning("Insert rejected by unique constraint")
            raise DuplicateEmailError(values["email"]) from exc
        return User(**values)

    def update(self, user_id: str, fields: dict[str, Any]) -> User:
        """Apply a partial update and return the stored record.

        Only name, email, password and updated_at are writable;
        `created_at` and `id` are never touched.
        """
        user_id = user_id.lower()
        values = {key: value for key, value in fields.items() if key in WRITABLE_COLUMNS}
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    update(users).where(users.c.id == user_id).values(**values)
                )
                if result.rowcount == 0:
                    raise UserNotFoundError(user_id)
                row = conn.execute(select(users).where(users.c.id == user_id)).one()
        except IntegrityError as exc:
            logger.warning("Update of user id=%s rejected by unique constraint", user_id)
            raise DuplicateEmailError(str(values.get("email", ""))) from exc
        return _to_entity(row)

    def delete(self, user_id: str) -> None:
        user_id = user_id.lower()
        with self._engine.begin() as conn:
            result = conn.execute(delete(users).where(users.c.id == user_id))
            if result.rowcount == 0:
                raise UserNotFoundError(user_id)

    def delete_many(self, user_ids: Iterable[str]) -> int:
        ids = sorted({user_id.lower() for user_id in user_ids})
        if not ids:
            return 0
        with self._engine.begin() as conn:
            result = conn.execute(delete(users).where(users.c.id.in_(ids)))
        return result.rowcount
