"""Domain models."""

from pinapp_notify.models.channel import ChannelType, NotificationPriority
from pinapp_notify.models.notification import Notification
from pinapp_notify.models.notification_result import NotificationResult
from pinapp_notify.models.recipient import Recipient

__all__ = [
    "ChannelType",
    "Notification",
    "NotificationPriority",
    "NotificationResult",
    "Recipient",
]
