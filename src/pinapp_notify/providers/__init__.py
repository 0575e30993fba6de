"""Notification providers and the provider registry."""

from pinapp_notify.providers.base import NotificationProvider
from pinapp_notify.providers.email import EmailNotificationProvider
from pinapp_notify.providers.mock import MockNotificationProvider
from pinapp_notify.providers.push import PushNotificationProvider
from pinapp_notify.providers.registry import ProviderRegistry
from pinapp_notify.providers.slack import SlackNotificationProvider
from pinapp_notify.providers.sms import SmsNotificationProvider

__all__ = [
    "EmailNotificationProvider",
    "MockNotificationProvider",
    "NotificationProvider",
    "ProviderRegistry",
    "PushNotificationProvider",
    "SlackNotificationProvider",
    "SmsNotificationProvider",
]
