"""User use cases."""

from .create_user import CreateUserRequest, CreateUserUseCase
from .delete_user import DeleteUserRequest, DeleteUserUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .response import UserResponse
from .update_user import UpdateUserRequest, UpdateUserUseCase, UserFieldsUpdate

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserFieldsUpdate",
    "UserResponse",
]
