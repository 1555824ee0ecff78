"""User event domain service."""

import logfire

from roster.domain.model import User
from roster.domain.value import UserEvent, UserOperation

from .base import Service


class EventPublisher:
    """Generic event publisher interface for all transports."""

    async def publish(self, topic: str, event: UserEvent) -> None:
        """Publish an event to a topic.

        Args:
            topic: Destination topic
            event: Event payload
        """
        raise NotImplementedError

    async def close(self) -> None:
        """Release transport resources."""
        pass


class UserEventService(Service):
    """Announces user lifecycle events.

    Publishing is fire-and-forget: a transport failure is logged and never
    fails the operation that triggered it.
    """

    def __init__(self, publisher: EventPublisher, topic: str) -> None:
        """Initialize user event service.

        Args:
            publisher: Event transport
            topic: Topic user events are published to
        """
        self.publisher = publisher
        self.topic = topic

    async def user_created(self, user: User) -> None:
        """Publish a CREATE event for a new user."""
        await self._publish(UserEvent(email=user.email, operation=UserOperation.CREATE))

    async def user_deleted(self, user: User) -> None:
        """Publish a DELETE event for a removed user."""
        await self._publish(UserEvent(email=user.email, operation=UserOperation.DELETE))

    async def _publish(self, event: UserEvent) -> None:
        with logfire.span(
            "user_event_service.publish",
            topic=self.topic,
            operation=event.operation.value,
        ):
            try:
                await self.publisher.publish(self.topic, event)
            except Exception as e:
                logfire.error(
                    "Failed to publish user event",
                    topic=self.topic,
                    operation=event.operation.value,
                    email=event.email,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return
            logfire.info(
                "User event published",
                topic=self.topic,
                operation=event.operation.value,
                email=event.email,
            )
