"""Unit tests for the Kafka event publisher."""

import json

import pytest
from kafka.errors import KafkaError

from roster.adapter.error import PublishError
from roster.adapter.kafka import KafkaEventPublisher, NullEventPublisher
from roster.adapter.kafka import publisher as publisher_module
from roster.domain.value import UserEvent, UserOperation


class FakeKafkaProducer:
    """Stand-in for KafkaProducer recording sends."""

    instances: list["FakeKafkaProducer"] = []

    def __init__(self, **config):
        self.config = config
        self.sent: list[tuple[str, bytes, bytes]] = []
        self.closed = False
        self.fail_with: Exception | None = None
        FakeKafkaProducer.instances.append(self)

    def send(self, topic, key=None, value=None):
        if self.fail_with:
            raise self.fail_with
        self.sent.append(
            (
                topic,
                self.config["key_serializer"](key),
                self.config["value_serializer"](value),
            )
        )

    def close(self, timeout=None):
        self.closed = True


@pytest.fixture
def fake_producer(monkeypatch):
    """Replace KafkaProducer in the publisher module."""
    FakeKafkaProducer.instances = []
    monkeypatch.setattr(publisher_module, "KafkaProducer", FakeKafkaProducer)
    return FakeKafkaProducer


def _event(operation=UserOperation.CREATE) -> UserEvent:
    return UserEvent(email="ivan@x.com", operation=operation)


class TestKafkaEventPublisher:
    """Tests for KafkaEventPublisher."""

    def test_producer_is_not_created_until_first_publish(self, fake_producer):
        """Construction does not connect to the broker."""
        # Act
        publisher = KafkaEventPublisher(bootstrap_servers="k1:9092, k2:9092")

        # Assert
        assert fake_producer.instances == []
        assert publisher.bootstrap_servers == ["k1:9092", "k2:9092"]

    @pytest.mark.asyncio
    async def test_publish_sends_json_keyed_by_email(self, fake_producer):
        """Events are sent as JSON with the email as key."""
        # Arrange
        publisher = KafkaEventPublisher(bootstrap_servers="localhost:9092")

        # Act
        await publisher.publish("user-events", _event())

        # Assert
        producer = fake_producer.instances[0]
        topic, key, value = producer.sent[0]
        assert topic == "user-events"
        assert key == b"ivan@x.com"
        assert json.loads(value) == {"email": "ivan@x.com", "operation": "CREATE"}

    @pytest.mark.asyncio
    async def test_producer_is_reused_across_publishes(self, fake_producer):
        """Only one producer is created."""
        # Arrange
        publisher = KafkaEventPublisher(bootstrap_servers="localhost:9092")

        # Act
        await publisher.publish("user-events", _event())
        await publisher.publish("user-events", _event(UserOperation.DELETE))

        # Assert
        assert len(fake_producer.instances) == 1
        assert len(fake_producer.instances[0].sent) == 2

    @pytest.mark.asyncio
    async def test_kafka_error_is_wrapped(self, fake_producer):
        """Broker errors surface as PublishError."""
        # Arrange
        publisher = KafkaEventPublisher(bootstrap_servers="localhost:9092")
        await publisher.publish("user-events", _event())
        fake_producer.instances[0].fail_with = KafkaError("leader not available")

        # Act & Assert
        with pytest.raises(PublishError):
            await publisher.publish("user-events", _event())

    @pytest.mark.asyncio
    async def test_close_closes_producer(self, fake_producer):
        """Closing flushes and closes the producer once."""
        # Arrange
        publisher = KafkaEventPublisher(bootstrap_servers="localhost:9092")
        await publisher.publish("user-events", _event())

        # Act
        await publisher.close()
        await publisher.close()

        # Assert
        assert fake_producer.instances[0].closed is True

    @pytest.mark.asyncio
    async def test_close_without_producer_is_noop(self, fake_producer):
        """Closing an unused publisher does nothing."""
        publisher = KafkaEventPublisher(bootstrap_servers="localhost:9092")

        await publisher.close()

        assert fake_producer.instances == []


class TestNullEventPublisher:
    """Tests for NullEventPublisher."""

    @pytest.mark.asyncio
    async def test_publish_drops_event(self):
        """Publishing with events disabled succeeds without a broker."""
        publisher = NullEventPublisher()

        await publisher.publish("user-events", _event())
        await publisher.close()
