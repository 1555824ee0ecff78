"""List users use case."""

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.domain.service import UserService

from .response import UserResponse


class ListUsersRequest(BaseModel):
    """List users request."""


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserResponse]


class ListUsersUseCase(BaseUseCase):
    """Use case for listing every registered user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow."""
        users = await self.user_service.list_users()
        return ListUsersResponse(users=[UserResponse.from_user(u) for u in users])
