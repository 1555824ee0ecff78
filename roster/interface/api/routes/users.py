"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import Field

from roster.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserFieldsUpdate,
    UserResponse,
)
from roster.domain.value.types import MAX_AGE, MIN_AGE

router = APIRouter(prefix="/api/v1/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(UserFieldsUpdate):
    """API request for updating a user.

    All fields are optional; omitted or null fields are left unchanged.
    """

    age: int | None = Field(default=None, ge=MIN_AGE, le=MAX_AGE, strict=True)


class UserResource(UserResponse):
    """User with navigation links."""

    links: dict[str, str]


def _to_resource(request: Request, user: UserResponse) -> UserResource:
    """Attach navigation links to a user response."""
    user_url = str(request.url_for("get_user", user_id=user.user_id))
    return UserResource(
        **user.model_dump(),
        links={
            "self": user_url,
            "users_list": str(request.url_for("list_users")),
            "update": str(request.url_for("update_user", user_id=user.user_id)),
            "delete": str(request.url_for("delete_user", user_id=user.user_id)),
        },
    )


@router.post("", response_model=UserResource, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: CreateUserRequest,
    request: Request,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserResource:
    """Create a new user.

    Publishes a CREATE event after the user is stored.

    Raises:
        DuplicateEmailError: Rendered as 409 when the email is taken

    Example:
        POST /api/v1/users

        Request:
        {"name": "Ivan", "email": "ivan@example.com", "age": 25}
    """
    user = await create_user_use_case.execute(body)
    return _to_resource(request, user)


@router.get("", response_model=list[UserResource])
async def list_users(
    request: Request,
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> list[UserResource]:
    """List all users, oldest first."""
    result = await list_users_use_case.execute(ListUsersRequest())
    return [_to_resource(request, user) for user in result.users]


@router.get("/{user_id}", response_model=UserResource)
async def get_user(
    user_id: UUID,
    request: Request,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResource:
    """Get a user by ID.

    Raises:
        NotFoundError: Rendered as 404
    """
    user = await get_user_use_case.execute(GetUserRequest(user_id=user_id))
    return _to_resource(request, user)


@router.put("/{user_id}", response_model=UserResource)
async def update_user(
    user_id: UUID,
    body: UpdateUserAPIRequest,
    request: Request,
    update_user_use_case: FromDishka[UpdateUserUseCase],
) -> UserResource:
    """Update a user's name, email and/or age.

    Only supplied, non-blank fields that differ from the stored values are
    written. An update that changes nothing returns the user as stored.

    Example:
        PUT /api/v1/users/123e4567-e89b-12d3-a456-426614174000

        Request:
        {"email": "new@example.com"}
    """
    user = await update_user_use_case.execute(
        UpdateUserRequest(
            user_id=user_id,
            name=body.name,
            email=body.email,
            age=body.age,
        )
    )
    return _to_resource(request, user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
) -> Response:
    """Delete a user and publish a DELETE event."""
    await delete_user_use_case.execute(DeleteUserRequest(user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
