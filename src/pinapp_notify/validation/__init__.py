"""Notification validation."""

from pinapp_notify.validation.notification_validator import (
    DEVICE_TOKEN_KEY,
    SLACK_CHANNEL_ID_KEY,
    NotificationValidator,
)

__all__ = ["DEVICE_TOKEN_KEY", "SLACK_CHANNEL_ID_KEY", "NotificationValidator"]
