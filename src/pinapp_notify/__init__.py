"""pinapp-notify: multi-channel notification routing with sync and async sending."""

from pinapp_notify.config import get_settings
from pinapp_notify.DI import Container
from pinapp_notify.models import (
    ChannelType,
    Notification,
    NotificationPriority,
    NotificationResult,
    Recipient,
)
from pinapp_notify.providers import NotificationProvider, ProviderRegistry
from pinapp_notify.services import NotificationService

__version__ = "0.1.0"
__all__ = [
    "ChannelType",
    "Container",
    "Notification",
    "NotificationPriority",
    "NotificationProvider",
    "NotificationResult",
    "NotificationService",
    "ProviderRegistry",
    "Recipient",
    "get_settings",
]
