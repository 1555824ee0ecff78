"""Delete user use case."""

from uuid import UUID

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.domain.service import UserService
from roster.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: UUID


class DeleteUserUseCase(BaseUseCase):
    """Use case for removing a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> None:
        """Execute delete user flow.

        Raises:
            NotFoundError: If no user has this ID
        """
        await self.user_service.delete_user(UserId(request.user_id))
