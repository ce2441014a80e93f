"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire the repository
adapter into use cases via constructor injection.
Tests replace `get_user_repository` through `app.dependency_overrides`.
"""

from fastapi import Depends

from app.application.users.create_user import CreateUserUseCase
from app.application.users.delete_user import DeleteUserUseCase
from app.application.users.delete_users import DeleteUsersUseCase
from app.application.users.get_user import GetUserUseCase
from app.application.users.list_users import ListUsersUseCase
from app.application.users.update_user import UpdateUserUseCase
from app.domain.users.batch_delete import BatchDeleteResolver
from app.domain.users.ports import UserRepository
from app.infrastructure.database import get_engine
from app.infrastructure.users.user_repository import SqlUserRepository


def get_user_repository() -> UserRepository:
    """Build the SQL user repository on the process-wide engine."""
    return SqlUserRepository(engine=get_engine())


def get_list_users_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListUsersUseCase:
    return ListUsersUseCase(user_repo=user_repo)


def get_get_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    return GetUserUseCase(user_repo=user_repo)


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    return CreateUserUseCase(user_repo=user_repo)


def get_update_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UpdateUserUseCase:
    return UpdateUserUseCase(user_repo=user_repo)


def get_delete_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeleteUserUseCase:
    return DeleteUserUseCase(user_repo=user_repo)


def get_delete_users_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeleteUsersUseCase:
    """Build DeleteUsersUseCase; unknown ids are dropped from the batch."""
    return DeleteUsersUseCase(
        user_repo=user_repo,
        resolver=BatchDeleteResolver(user_repo),
    )
