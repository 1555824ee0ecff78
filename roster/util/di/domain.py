"""Domain layer DI providers."""

from dishka import Scope, provide

from roster.config import EventSettings
from roster.domain.repository import UserRepository
from roster.domain.service import (
    EventPublisher,
    UserEventService,
    UserReconciler,
    UserService,
)
from roster.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_reconciler(self, user_repository: UserRepository) -> UserReconciler:
        """Provide user update reconciliation engine."""
        return UserReconciler(user_repository=user_repository)

    @provide
    def get_user_event_service(
        self, publisher: EventPublisher, event_settings: EventSettings
    ) -> UserEventService:
        """Provide user event domain service."""
        return UserEventService(publisher=publisher, topic=event_settings.topic)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        reconciler: UserReconciler,
        event_service: UserEventService,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            reconciler=reconciler,
            event_service=event_service,
        )
