"""Get user use case."""

from uuid import UUID

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.domain.service import UserService
from roster.domain.value import UserId

from .response import UserResponse


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: UUID


class GetUserUseCase(BaseUseCase):
    """Use case for fetching a single user by ID."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Execute get user flow.

        Raises:
            NotFoundError: If no user has this ID
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return UserResponse.from_user(user)
