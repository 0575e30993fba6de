# -*- coding: utf-8 -*-
"""Slack provider (simulated)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Optional

import structlog

from pinapp_notify.exceptions import ProviderError
from pinapp_notify.models.channel import ChannelType
from pinapp_notify.models.notification_result import NotificationResult
from pinapp_notify.providers.base import NotificationProvider
from pinapp_notify.utils.masking import mask_secret, truncate_message
from pinapp_notify.validation.notification_validator import SLACK_CHANNEL_ID_KEY

if TYPE_CHECKING:
    from pinapp_notify.models.notification import Notification


class SlackNotificationProvider(NotificationProvider):
    """Post notifications to the Slack channel in recipient metadata['slackChannelId']."""

    PROVIDER_NAME = "SlackProvider"

    def __init__(
        self,
        bot_token: Optional[str] = None,
        workspace: str = "pinapp",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._bot_token = bot_token
        self._workspace = workspace
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._logger.debug(
            "slack_provider_initialized",
            bot_token_masked=mask_secret(bot_token),
            workspace=workspace,
        )

    @property
    def name(self) -> str:
        return self.PROVIDER_NAME

    def supports(self, channel: ChannelType) -> bool:
        return channel == ChannelType.SLACK

    def send(self, notification: "Notification") -> NotificationResult:
        channel_id = notification.recipient.metadata_value(SLACK_CHANNEL_ID_KEY)
        if not channel_id or not channel_id.strip():
            self._logger.error("slack_provider_missing_channel_id", notification_id=str(notification.id))
            raise ProviderError(
                f"recipient metadata has no valid '{SLACK_CHANNEL_ID_KEY}'",
                provider_name=self.PROVIDER_NAME,
            )

        self._logger.info(
            "slack_message_posted",
            notification_id=str(notification.id),
            workspace=self._workspace,
            slack_channel_id=channel_id,
            text=truncate_message(notification.message),
            priority=notification.priority.value,
            bot_token_configured=self._bot_token is not None,
        )
        return NotificationResult.succeeded(notification.id, self.PROVIDER_NAME, ChannelType.SLACK)
