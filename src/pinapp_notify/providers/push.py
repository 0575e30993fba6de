# -*- coding: utf-8 -*-
"""Push provider (simulated)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Optional
from uuid import uuid4

import structlog

from pinapp_notify.exceptions import ProviderError
from pinapp_notify.models.channel import ChannelType
from pinapp_notify.models.notification_result import NotificationResult
from pinapp_notify.providers.base import NotificationProvider
from pinapp_notify.utils.masking import mask_secret, mask_token, truncate_message
from pinapp_notify.validation.notification_validator import DEVICE_TOKEN_KEY

if TYPE_CHECKING:
    from pinapp_notify.models.notification import Notification


class PushNotificationProvider(NotificationProvider):
    """Deliver push notifications to the device in recipient metadata['deviceToken'].

    Optional metadata keys: title, badge, sound.
    """

    PROVIDER_NAME = "PushProvider"
    DEFAULT_APPLICATION_ID = "com.pinapp.default"

    def __init__(
        self,
        server_key: Optional[str] = None,
        application_id: Optional[str] = None,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._server_key = server_key
        self._application_id = application_id or self.DEFAULT_APPLICATION_ID
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._logger.debug(
            "push_provider_initialized",
            server_key_masked=mask_secret(server_key),
            application_id=self._application_id,
        )

    @property
    def name(self) -> str:
        return self.PROVIDER_NAME

    @property
    def application_id(self) -> str:
        return self._application_id

    def supports(self, channel: ChannelType) -> bool:
        return channel == ChannelType.PUSH

    def send(self, notification: "Notification") -> NotificationResult:
        recipient = notification.recipient
        device_token = recipient.metadata_value(DEVICE_TOKEN_KEY)
        if not device_token or not device_token.strip():
            self._logger.error("push_provider_missing_device_token", notification_id=str(notification.id))
            raise ProviderError(
                f"recipient metadata has no valid '{DEVICE_TOKEN_KEY}'",
                provider_name=self.PROVIDER_NAME,
            )

        self._logger.info(
            "push_sent",
            notification_id=str(notification.id),
            device_token_masked=mask_token(device_token),
            application_id=self._application_id,
            title=recipient.metadata_value("title") or "Notification",
            badge=recipient.metadata_value("badge") or "1",
            sound=recipient.metadata_value("sound") or "default",
            body=truncate_message(notification.message),
            priority=notification.priority.value,
            message_id=str(uuid4()),
            server_key_configured=self._server_key is not None,
        )
        return NotificationResult.succeeded(notification.id, self.PROVIDER_NAME, ChannelType.PUSH)
