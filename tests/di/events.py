"""Mock event providers for testing."""

from dishka import Scope, provide

from roster.adapter.kafka import MockEventPublisher
from roster.domain.service import EventPublisher
from roster.util.di.infrastructure.events import EventsProvider


class MockEventsProvider(EventsProvider):
    """Mock events provider recording published events in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_event_publisher(self) -> MockEventPublisher:
        """Provide the recording publisher, resolvable for assertions."""
        return MockEventPublisher()

    @provide(scope=Scope.APP)
    def get_event_publisher(self, publisher: MockEventPublisher) -> EventPublisher:
        """Provide the recording publisher as the event publisher."""
        return publisher
