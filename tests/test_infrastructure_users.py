"""
Tests for the SQL user repository.

Runs the adapter against an in-memory SQLite database.
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.users.errors import DuplicateEmailError, UserNotFoundError
from app.domain.users.identifiers import is_valid_identifier
from tests.factories import USER_ID

JANE = {"name": "Jane Doe", "email": "jane@gmail.com", "password": "longenough"}
JOHN = {"name": "John Roe", "email": "john@yahoo.com", "password": "alsolongenough"}


class TestSqlUserRepository:
    def test_create_then_find_round_trip(self, user_repo) -> None:
        created = user_repo.create(JANE)
        fetched = user_repo.find_by_id(created.id)

        assert is_valid_identifier(created.id)
        assert fetched == created
        assert fetched.password == "longenough"
        assert fetched.created_at == fetched.updated_at
        assert fetched.created_at.tzinfo is not None

    def test_find_by_id_ignores_case(self, user_repo) -> None:
        created = user_repo.create(JANE)
        assert user_repo.find_by_id(created.id.upper()) == created

    def test_find_missing_returns_none(self, user_repo) -> None:
        assert user_repo.find_by_id(USER_ID) is None
        assert user_repo.find_by_email("nobody@gmail.com") is None

    def test_find_all_and_by_email(self, user_repo) -> None:
        jane = user_repo.create(JANE)
        john = user_repo.create(JOHN)
        assert {u.id for u in user_repo.find_all()} == {jane.id, john.id}
        assert user_repo.find_by_email("john@yahoo.com") == john

    def test_unique_email_constraint_backstop(self, user_repo) -> None:
        user_repo.create(JANE)
        with pytest.raises(DuplicateEmailError):
            user_repo.create({**JOHN, "email": JANE["email"]})

    def test_update_keeps_created_at(self, user_repo) -> None:
        created = user_repo.create(JANE)
        later = datetime.now(timezone.utc) + timedelta(seconds=5)

        updated = user_repo.update(created.id, {"name": "Janet", "updated_at": later})

        assert updated.name == "Janet"
        assert updated.email == created.email
        assert updated.created_at == created.created_at
        assert updated.updated_at == later

    def test_update_ignores_non_writable_columns(self, user_repo) -> None:
        created = user_repo.create(JANE)
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        updated = user_repo.update(created.id, {"name": "Janet", "created_at": epoch})
        assert updated.created_at == created.created_at

    def test_update_to_taken_email_rejected(self, user_repo) -> None:
        user_repo.create(JANE)
        john = user_repo.create(JOHN)
        with pytest.raises(DuplicateEmailError):
            user_repo.update(john.id, {"email": JANE["email"]})

    def test_update_missing_user(self, user_repo) -> None:
        with pytest.raises(UserNotFoundError):
            user_repo.update(USER_ID, {"name": "Janet"})

    def test_delete(self, user_repo) -> None:
        created = user_repo.create(JANE)
        user_repo.delete(created.id)
        assert user_repo.find_by_id(created.id) is None
        with pytest.raises(UserNotFoundError):
            user_repo.delete(created.id)

    def test_find_many_and_delete_many(self, user_repo) -> None:
        jane = user_repo.create(JANE)
        john = user_repo.create(JOHN)
        ids = {jane.id, USER_ID}

        assert [u.id for u in user_repo.find_many_by_id(ids)] == [jane.id]
        assert user_repo.delete_many(ids) == 1
        assert [u.id for u in user_repo.find_all()] == [john.id]

    def test_empty_id_sets(self, user_repo) -> None:
        assert user_repo.find_many_by_id(set()) == []
        assert user_repo.delete_many(set()) == 0
