# -*- coding: utf-8 -*-
"""Application services."""

from pinapp_notify.services.delivery_stats import ChannelDeliveryStats, DeliveryStatsCollector
from pinapp_notify.services.notification_service import NotificationService

__all__ = [
    "ChannelDeliveryStats",
    "DeliveryStatsCollector",
    "NotificationService",
]
