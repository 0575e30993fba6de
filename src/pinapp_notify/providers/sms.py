# -*- coding: utf-8 -*-
"""SMS provider (simulated)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Optional
from uuid import uuid4

import structlog

from pinapp_notify.exceptions import ProviderError
from pinapp_notify.models.channel import ChannelType
from pinapp_notify.models.notification_result import NotificationResult
from pinapp_notify.providers.base import NotificationProvider
from pinapp_notify.utils.masking import mask_phone, mask_secret, truncate_message

if TYPE_CHECKING:
    from pinapp_notify.models.notification import Notification


class SmsNotificationProvider(NotificationProvider):
    """Deliver notifications over SMS to the recipient phone."""

    PROVIDER_NAME = "SmsProvider"

    def __init__(
        self,
        api_key: Optional[str] = None,
        sender_id: str = "PinApp",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._api_key = api_key
        self._sender_id = sender_id or "PinApp"
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._logger.debug(
            "sms_provider_initialized",
            api_key_masked=mask_secret(api_key),
            sender_id=self._sender_id,
        )

    @property
    def name(self) -> str:
        return self.PROVIDER_NAME

    @property
    def sender_id(self) -> str:
        return self._sender_id

    def supports(self, channel: ChannelType) -> bool:
        return channel == ChannelType.SMS

    def send(self, notification: "Notification") -> NotificationResult:
        phone = notification.recipient.phone
        if not phone or not phone.strip():
            self._logger.error("sms_provider_missing_phone", notification_id=str(notification.id))
            raise ProviderError("recipient has no phone number", provider_name=self.PROVIDER_NAME)

        self._logger.info(
            "sms_sent",
            notification_id=str(notification.id),
            phone_masked=mask_phone(phone),
            sender_id=self._sender_id,
            body=truncate_message(notification.message),
            body_length=len(notification.message),
            priority=notification.priority.value,
            message_id=str(uuid4()),
            api_key_configured=self._api_key is not None,
        )
        return NotificationResult.succeeded(notification.id, self.PROVIDER_NAME, ChannelType.SMS)
