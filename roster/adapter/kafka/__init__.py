"""Kafka event adapter."""

from .publisher import (
    KafkaEventPublisher,
    MockEventPublisher,
    NullEventPublisher,
)

__all__ = ["KafkaEventPublisher", "MockEventPublisher", "NullEventPublisher"]
