# -*- coding: utf-8 -*-
"""Email provider (simulated: logs the message instead of calling an email API)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Optional
from uuid import uuid4

import structlog

from pinapp_notify.exceptions import ProviderError
from pinapp_notify.models.channel import ChannelType
from pinapp_notify.models.notification_result import NotificationResult
from pinapp_notify.providers.base import NotificationProvider
from pinapp_notify.utils.masking import mask_email, mask_secret, truncate_message

if TYPE_CHECKING:
    from pinapp_notify.models.notification import Notification

SUBJECT_KEY = "subject"


class EmailNotificationProvider(NotificationProvider):
    """Deliver notifications over EMAIL.

    Requires the recipient email and a 'subject' entry in recipient metadata;
    the message body is the (already expanded) notification message.
    """

    PROVIDER_NAME = "EmailProvider"

    def __init__(
        self,
        api_key: Optional[str] = None,
        sender: str = "no-reply@pinapp.local",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: Optional email API key (never logged in clear).
            sender: From address used for outgoing mail.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._api_key = api_key
        self._sender = sender
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._logger.debug(
            "email_provider_initialized",
            api_key_masked=mask_secret(api_key),
            sender=sender,
        )

    @property
    def name(self) -> str:
        return self.PROVIDER_NAME

    def supports(self, channel: ChannelType) -> bool:
        return channel == ChannelType.EMAIL

    def send(self, notification: "Notification") -> NotificationResult:
        recipient = notification.recipient
        email = recipient.email
        if not email or not email.strip():
            self._logger.error("email_provider_missing_email", notification_id=str(notification.id))
            raise ProviderError(
                "recipient has no email address",
                provider_name=self.PROVIDER_NAME,
            )

        subject = recipient.metadata_value(SUBJECT_KEY)
        if not subject or not subject.strip():
            self._logger.error("email_provider_missing_subject", notification_id=str(notification.id))
            raise ProviderError(
                f"recipient metadata must contain a '{SUBJECT_KEY}'",
                provider_name=self.PROVIDER_NAME,
            )

        message_id = str(uuid4())
        self._logger.info(
            "email_sent",
            notification_id=str(notification.id),
            email_masked=mask_email(email),
            sender=self._sender,
            subject=subject,
            body=truncate_message(notification.message),
            priority=notification.priority.value,
            message_id=message_id,
            api_key_configured=self._api_key is not None,
        )
        return NotificationResult.succeeded(notification.id, self.PROVIDER_NAME, ChannelType.EMAIL)
