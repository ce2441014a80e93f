"""
Tests for the users application layer (use cases).

Use cases run against a MagicMock repository, so each test can
assert exactly which storage calls happen and, just as important,
which never happen once an error has been detected.
"""

from unittest.mock import MagicMock, patch

import pytest

from app.application.users.create_user import CreateUserUseCase
from app.application.users.delete_user import DeleteUserUseCase
from app.application.users.delete_users import DeleteUsersUseCase
from app.application.users.dtos import (
    CreateUserCommand,
    DeleteUserCommand,
    DeleteUsersCommand,
    GetUserQuery,
    UpdateUserCommand,
)
from app.application.users.get_user import GetUserUseCase
from app.application.users.list_users import ListUsersUseCase
from app.application.users.update_user import UpdateUserUseCase
from app.domain.users.batch_delete import BatchDeleteResolver
from app.domain.users.errors import (
    DuplicateEmailError,
    InvalidBatchRequestError,
    MalformedIdentifierError,
    NoOpUpdateError,
    UserNotFoundError,
    ValidationFailureError,
)
from app.domain.users.ports import UserRepository
from app.domain.users.validation import ALL_FIELDS_REQUIRED, validate
from tests.factories import CREATED_AT, OTHER_ID, USER_ID, make_user


@pytest.fixture
def repo() -> MagicMock:
    return MagicMock(spec=UserRepository)


class TestListUsersUseCase:
    def test_returns_repository_users(self, repo) -> None:
        repo.find_all.return_value = [make_user()]
        assert ListUsersUseCase(repo).execute() == [make_user()]


class TestGetUserUseCase:
    """Tests for the GetUserUseCase."""

    def test_malformed_id_never_reaches_storage(self, repo) -> None:
        with pytest.raises(MalformedIdentifierError):
            GetUserUseCase(repo).execute(GetUserQuery(user_id="not-a-uuid"))
        repo.find_by_id.assert_not_called()

    def test_missing_user_raises_not_found(self, repo) -> None:
        repo.find_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            GetUserUseCase(repo).execute(GetUserQuery(user_id=USER_ID))

    def test_id_lookup_is_case_insensitive(self, repo) -> None:
        repo.find_by_id.return_value = make_user()
        upper = "AAAAAAAA-BBBB-CCCC-DDDD-EEEEEEEEEEEE"
        GetUserUseCase(repo).execute(GetUserQuery(user_id=upper))
        repo.find_by_id.assert_called_once_with(upper.lower())


class TestCreateUserUseCase:
    """Tests for the CreateUserUseCase."""

    def test_creates_with_normalised_values(self, repo) -> None:
        repo.find_by_email.return_value = None
        repo.create.return_value = make_user()
        command = CreateUserCommand(
            name=" Jane Doe ", email="jane@gmail.com", password="longenough"
        )
        user = CreateUserUseCase(repo).execute(command)
        repo.create.assert_called_once_with(
            {"name": "Jane Doe", "email": "jane@gmail.com", "password": "longenough"}
        )
        assert user == make_user()

    def test_all_fields_missing(self, repo) -> None:
        with pytest.raises(ValidationFailureError) as excinfo:
            CreateUserUseCase(repo).execute(CreateUserCommand())
        assert excinfo.value.messages == [ALL_FIELDS_REQUIRED]
        repo.find_by_email.assert_not_called()
        repo.create.assert_not_called()

    def test_duplicate_email_blocks_insert(self, repo) -> None:
        repo.find_by_email.return_value = make_user(OTHER_ID)
        command = CreateUserCommand(
            name="Jane Doe", email="jane@gmail.com", password="longenough"
        )
        with pytest.raises(DuplicateEmailError):
            CreateUserUseCase(repo).execute(command)
        repo.create.assert_not_called()


class TestUpdateUserUseCase:
    """Tests for the UpdateUserUseCase and its failure priority."""

    def test_malformed_id_checked_first(self, repo) -> None:
        with pytest.raises(MalformedIdentifierError):
            UpdateUserUseCase(repo).execute(
                UpdateUserCommand(user_id="bad", payload={"email": "bad"})
            )
        repo.find_by_id.assert_not_called()

    def test_payload_validated_before_lookup(self, repo) -> None:
        repo.find_by_id.return_value = None
        with pytest.raises(ValidationFailureError):
            UpdateUserUseCase(repo).execute(
                UpdateUserCommand(user_id=USER_ID, payload={"email": "bad"})
            )
        repo.find_by_id.assert_not_called()

    def test_missing_user(self, repo) -> None:
        repo.find_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            UpdateUserUseCase(repo).execute(
                UpdateUserCommand(user_id=USER_ID, payload={"name": "Janet"})
            )
        repo.update.assert_not_called()

    def test_email_owned_by_other_user_conflicts(self, repo) -> None:
        repo.find_by_id.return_value = make_user()
        repo.find_by_email.return_value = make_user(OTHER_ID, email="taken@gmail.com")
        with pytest.raises(DuplicateEmailError):
            UpdateUserUseCase(repo).execute(
                UpdateUserCommand(user_id=USER_ID, payload={"email": "taken@gmail.com"})
            )
        repo.update.assert_not_called()

    def test_no_op_update_writes_nothing(self, repo) -> None:
        repo.find_by_id.return_value = make_user()
        with pytest.raises(NoOpUpdateError):
            UpdateUserUseCase(repo).execute(
                UpdateUserCommand(
                    user_id=USER_ID,
                    payload={"name": "Jane Doe", "email": "jane@gmail.com"},
                )
            )
        repo.find_by_email.assert_not_called()
        repo.update.assert_not_called()

    def test_writes_only_supplied_fields(self, repo) -> None:
        repo.find_by_id.return_value = make_user()
        repo.find_by_email.return_value = None
        repo.update.return_value = make_user(email="jane@outlook.com")

        UpdateUserUseCase(repo).execute(
            UpdateUserCommand(user_id=USER_ID, payload={"email": "jane@outlook.com"})
        )

        repo.find_by_email.assert_called_once_with("jane@outlook.com")
        user_id, fields = repo.update.call_args.args
        assert user_id == USER_ID
        assert set(fields) == {"email", "updated_at"}
        assert fields["updated_at"] >= CREATED_AT

    def test_payload_validated_once(self, repo) -> None:
        repo.find_by_id.return_value = make_user()
        repo.update.return_value = make_user(name="Janet")

        with patch(
            "app.application.users.update_user.validate", wraps=validate
        ) as first, patch("app.domain.users.update_planner.validate") as second:
            UpdateUserUseCase(repo).execute(
                UpdateUserCommand(user_id=USER_ID, payload={"name": "Janet"})
            )

        first.assert_called_once()
        second.assert_not_called()


class TestDeleteUserUseCase:
    def test_missing_user_not_deleted(self, repo) -> None:
        repo.find_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            DeleteUserUseCase(repo).execute(DeleteUserCommand(user_id=USER_ID))
        repo.delete.assert_not_called()

    def test_deletes_existing_user(self, repo) -> None:
        repo.find_by_id.return_value = make_user()
        DeleteUserUseCase(repo).execute(DeleteUserCommand(user_id=USER_ID))
        repo.delete.assert_called_once_with(USER_ID)


class TestDeleteUsersUseCase:
    def _use_case(self, repo: MagicMock) -> DeleteUsersUseCase:
        return DeleteUsersUseCase(repo, BatchDeleteResolver(repo))

    def test_deletes_discovered_subset(self, repo) -> None:
        repo.find_many_by_id.return_value = [make_user(USER_ID)]
        repo.delete_many.return_value = 1

        result = self._use_case(repo).execute(DeleteUsersCommand(ids=[USER_ID, OTHER_ID]))

        repo.delete_many.assert_called_once_with(frozenset({USER_ID}))
        assert result.deleted_count == 1
        assert result.deleted_ids == [USER_ID]
        assert result.skipped_ids == [OTHER_ID]

    def test_invalid_batch_deletes_nothing(self, repo) -> None:
        with pytest.raises(InvalidBatchRequestError):
            self._use_case(repo).execute(DeleteUsersCommand(ids=["not-a-uuid", USER_ID]))
        repo.delete_many.assert_not_called()
