"""Delivery events published by NotificationService after each dispatch."""

from __future__ import annotations

from uuid import UUID

from bubus import BaseEvent  # type: ignore[import-untyped]

from pinapp_notify.models.channel import ChannelType, NotificationPriority


class NotificationSentEvent(BaseEvent[None]):
    """Emitted when a provider reports a successful send."""

    notification_id: UUID
    provider_name: str
    channel: ChannelType
    priority: NotificationPriority = NotificationPriority.NORMAL


class NotificationFailedEvent(BaseEvent[None]):
    """Emitted when a provider returns a failure result or raises ProviderError.

    provider_name is "none" when no provider was registered for the channel.
    """

    notification_id: UUID
    provider_name: str
    channel: ChannelType
    priority: NotificationPriority = NotificationPriority.NORMAL
    error_message: str
