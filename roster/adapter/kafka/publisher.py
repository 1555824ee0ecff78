"""Kafka user event publisher.

Publishes JSON-encoded user events with kafka-python's ``KafkaProducer``.
The producer connects lazily on the first publish so that the service can
start while the broker is unreachable.
"""

import asyncio
import json
import threading

import logfire
from kafka import KafkaProducer
from kafka.errors import KafkaError

from roster.adapter.error import PublishError
from roster.domain.service.event_service import EventPublisher
from roster.domain.value import UserEvent


class KafkaEventPublisher(EventPublisher):
    """Event publisher backed by a Kafka producer."""

    def __init__(self, bootstrap_servers: str) -> None:
        """Initialize Kafka publisher.

        Args:
            bootstrap_servers: Comma-separated list of broker addresses
        """
        self.bootstrap_servers = [
            server.strip() for server in bootstrap_servers.split(",") if server.strip()
        ]
        self._producer: KafkaProducer | None = None
        self._lock = threading.Lock()

    def _get_producer(self) -> KafkaProducer:
        """Create the producer on first use."""
        with self._lock:
            if self._producer is None:
                self._producer = KafkaProducer(
                    bootstrap_servers=self.bootstrap_servers,
                    value_serializer=lambda v: json.dumps(v).encode("utf-8"),
                    key_serializer=lambda k: k.encode("utf-8"),
                    retries=3,
                    acks="all",  # Wait for all replicas to acknowledge
                    request_timeout_ms=30000,
                )
                logfire.info(
                    "Kafka producer connected",
                    bootstrap_servers=",".join(self.bootstrap_servers),
                )
            return self._producer

    def _send(self, topic: str, event: UserEvent) -> None:
        producer = self._get_producer()
        # Keyed by email so events for one address stay ordered
        producer.send(topic, key=event.email, value=event.model_dump(mode="json"))

    async def publish(self, topic: str, event: UserEvent) -> None:
        """Queue an event for delivery.

        Delivery is asynchronous inside the producer; this returns once the
        event has been handed to it.

        Raises:
            PublishError: If the producer cannot be created or rejects the event
        """
        try:
            await asyncio.to_thread(self._send, topic, event)
        except KafkaError as e:
            raise PublishError(f"Kafka publish to {topic} failed: {e}") from e

    async def close(self) -> None:
        """Flush pending events and close the producer."""
        producer = self._producer
        if producer is None:
            return
        self._producer = None
        await asyncio.to_thread(producer.close, 10)
        logfire.info("Kafka producer closed")


class NullEventPublisher(EventPublisher):
    """Publisher used when event publishing is disabled."""

    async def publish(self, topic: str, event: UserEvent) -> None:
        """Drop the event."""
        logfire.debug(
            "Event publishing disabled, dropping event",
            topic=topic,
            operation=event.operation.value,
        )


class MockEventPublisher(EventPublisher):
    """Mock publisher for testing.

    Records published events in memory instead of sending them.
    """

    def __init__(self) -> None:
        self.published: list[tuple[str, UserEvent]] = []

    async def publish(self, topic: str, event: UserEvent) -> None:
        """Record the event."""
        self.published.append((topic, event))
