# -*- coding: utf-8 -*-
"""Base provider: the capability every channel sender implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from pinapp_notify.models.channel import ChannelType
    from pinapp_notify.models.notification import Notification
    from pinapp_notify.models.notification_result import NotificationResult


class NotificationProvider(ABC):
    """Abstract sender for one delivery channel."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name reported in results and errors."""
        pass

    @abstractmethod
    def supports(self, channel: "ChannelType") -> bool:
        """Return True if this provider can deliver over channel."""
        pass

    @abstractmethod
    def send(self, notification: "Notification") -> "NotificationResult":
        """Send a notification.

        Args:
            notification: Validated notification with its message already expanded.

        Raises:
            ProviderError: If the provider cannot process the notification.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
