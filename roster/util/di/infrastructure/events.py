"""Event publishing infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from roster.adapter.kafka import KafkaEventPublisher, NullEventPublisher
from roster.config import EventSettings
from roster.domain.service import EventPublisher
from roster.util.di.base import ProviderBase


class EventsProvider(ProviderBase):
    """Events component base."""

    __mock_component__ = "events"


class ProdEventsProvider(EventsProvider):
    """Production events provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_event_publisher(
        self, event_settings: EventSettings
    ) -> AsyncIterator[EventPublisher]:
        """Provide event publisher.

        Kafka when events are enabled, otherwise a publisher that drops
        events. The publisher is closed when the container closes.
        """
        publisher: EventPublisher
        if event_settings.enabled:
            publisher = KafkaEventPublisher(
                bootstrap_servers=event_settings.bootstrap_servers
            )
        else:
            publisher = NullEventPublisher()

        yield publisher
        await publisher.close()
