# -*- coding: utf-8 -*-
"""Channel and priority enumerations."""

from __future__ import annotations

from enum import Enum


class ChannelType(str, Enum):
    """Delivery medium a notification can be sent through."""

    EMAIL = "EMAIL"
    SMS = "SMS"
    PUSH = "PUSH"
    SLACK = "SLACK"


class NotificationPriority(str, Enum):
    """Relative urgency of a notification."""

    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"
