"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Domain errors are mapped to the error envelope by the centralized
error handlers; every success goes through the success envelope.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

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
from app.domain.users.entities import User
from app.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_delete_users_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from app.interfaces.users.schemas import (
    CreateUserRequest,
    DeleteUsersData,
    DeleteUsersRequest,
    DeleteUsersResponse,
    ErrorResponse,
    MessageResponse,
    UpdateUserRequest,
    UserItem,
    UserListResponse,
    UserResponse,
)

router = APIRouter(prefix="/user", tags=["users"])

BAD_REQUEST = {400: {"model": ErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}}
SERVER_ERROR = {500: {"model": ErrorResponse}}


def _to_item(user: User) -> UserItem:
    return UserItem(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.get(
    "",
    response_model=UserListResponse,
    responses={**SERVER_ERROR},
    summary="Retrieve all users",
)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> UserListResponse:
    users = use_case.execute()
    return UserListResponse(
        status=status.HTTP_200_OK,
        message="Users retrieved successfully",
        data=[_to_item(u) for u in users],
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **SERVER_ERROR},
    summary="Create a new user",
    description="Create a user. Name, email and password are all required.",
)
def create_user(
    request: Optional[CreateUserRequest] = None,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    request = request or CreateUserRequest()
    command = CreateUserCommand(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    user = use_case.execute(command)
    return UserResponse(
        status=status.HTTP_201_CREATED,
        message="User created successfully",
        data=_to_item(user),
    )


@router.delete(
    "",
    response_model=DeleteUsersResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    summary="Delete multiple users",
    description=(
        "Delete every listed user that exists. All ids must be valid UUIDs; "
        "ids that match no user are skipped."
    ),
)
def delete_users(
    request: Optional[DeleteUsersRequest] = None,
    use_case: DeleteUsersUseCase = Depends(get_delete_users_use_case),
) -> DeleteUsersResponse:
    ids = request.ids if request is not None else None
    result = use_case.execute(DeleteUsersCommand(ids=ids))
    return DeleteUsersResponse(
        status=status.HTTP_200_OK,
        message="Users deleted successfully",
        data=DeleteUsersData(
            deleted_count=result.deleted_count,
            deleted_ids=result.deleted_ids,
            skipped_ids=result.skipped_ids,
        ),
    )


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    summary="Retrieve a user by ID",
)
def get_user(
    user_id: str,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> UserResponse:
    user = use_case.execute(GetUserQuery(user_id=user_id))
    return UserResponse(
        status=status.HTTP_200_OK,
        message="User retrieved successfully",
        data=_to_item(user),
    )


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    summary="Update a user by ID",
    description="Update any subset of name, email and password.",
)
def update_user(
    user_id: str,
    request: Optional[UpdateUserRequest] = None,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserResponse:
    payload = request.model_dump(exclude_unset=True) if request is not None else {}
    user = use_case.execute(UpdateUserCommand(user_id=user_id, payload=payload))
    return UserResponse(
        status=status.HTTP_200_OK,
        message="User updated successfully",
        data=_to_item(user),
    )


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    summary="Delete a user by ID",
)
def delete_user(
    user_id: str,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> MessageResponse:
    use_case.execute(DeleteUserCommand(user_id=user_id))
    return MessageResponse(
        status=status.HTTP_200_OK,
        message="User deleted successfully",
    )
