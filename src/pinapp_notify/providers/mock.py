# -*- coding: utf-8 -*-
"""Mock provider for tests and demos: succeeds or fails on demand without side effects."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Optional

import structlog

from pinapp_notify.models.channel import ChannelType
from pinapp_notify.models.notification_result import NotificationResult
from pinapp_notify.providers.base import NotificationProvider

if TYPE_CHECKING:
    from pinapp_notify.models.notification import Notification


class MockNotificationProvider(NotificationProvider):
    """Single-channel provider that returns a success or failure result and records calls."""

    def __init__(
        self,
        channel: ChannelType,
        name: Optional[str] = None,
        *,
        should_succeed: bool = True,
        get_logger: Callable[[str], Any] = structlog.get_logger,
    ) -> None:
        self._channel = channel
        self._name = name or f"Mock{channel.value.title()}Provider"
        self._should_succeed = should_succeed
        self._logger = get_logger(self.__class__.__name__)
        self.sent: list["Notification"] = []

    @property
    def name(self) -> str:
        return self._name

    def supports(self, channel: ChannelType) -> bool:
        return channel == self._channel

    def send(self, notification: "Notification") -> NotificationResult:
        self.sent.append(notification)
        if self._should_succeed:
            self._logger.info(
                "mock_send_succeeded",
                notification_id=str(notification.id),
                channel=self._channel.value,
                provider_name=self._name,
            )
            return NotificationResult.succeeded(notification.id, self._name, self._channel)

        error = f"simulated failure in mock provider '{self._name}'"
        self._logger.warning(
            "mock_send_failed",
            notification_id=str(notification.id),
            channel=self._channel.value,
            provider_name=self._name,
        )
        return NotificationResult.failed(notification.id, self._name, self._channel, error)

    @classmethod
    def for_email(cls, **kwargs: Any) -> MockNotificationProvider:
        return cls(ChannelType.EMAIL, **kwargs)

    @classmethod
    def for_sms(cls, **kwargs: Any) -> MockNotificationProvider:
        return cls(ChannelType.SMS, **kwargs)

    @classmethod
    def for_push(cls, **kwargs: Any) -> MockNotificationProvider:
        return cls(ChannelType.PUSH, **kwargs)

    @classmethod
    def for_slack(cls, **kwargs: Any) -> MockNotificationProvider:
        return cls(ChannelType.SLACK, **kwargs)
