"""Delivery event types published on the bubus event bus."""

from pinapp_notify.events.delivery_events import (
    NotificationFailedEvent,
    NotificationSentEvent,
)

__all__ = [
    "NotificationFailedEvent",
    "NotificationSentEvent",
]
