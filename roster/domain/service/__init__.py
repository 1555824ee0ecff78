"""Domain services."""

from .base import Service
from .event_service import EventPublisher, UserEventService
from .reconciliation import ReconciliationResult, UserReconciler
from .user_service import UserService

__all__ = [
    "EventPublisher",
    "ReconciliationResult",
    "Service",
    "UserEventService",
    "UserReconciler",
    "UserService",
]
