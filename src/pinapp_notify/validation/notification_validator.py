# -*- coding: utf-8 -*-
"""NotificationValidator: fail-fast precondition checks per channel.

Checks (in order), stopping at the first violation:
1. notification and channel present (InvalidArgumentError)
2. message non-blank
3. recipient present
4. channel-specific contact data (email, phone, deviceToken, slackChannelId)
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, Optional

import structlog

from pinapp_notify.exceptions import InvalidArgumentError, NotificationValidationError
from pinapp_notify.models.channel import ChannelType
from pinapp_notify.utils.masking import mask_email, mask_phone

if TYPE_CHECKING:
    from pinapp_notify.models.notification import Notification
    from pinapp_notify.models.recipient import Recipient

_EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9_+&*-]+(?:\.[a-zA-Z0-9_+&*-]+)*@(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,}$"
)
_EMAIL_MAX_LENGTH = 254
_PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{7,14}$")
_PHONE_STRIP_PATTERN = re.compile(r"[\s\-()]")

DEVICE_TOKEN_KEY = "deviceToken"
SLACK_CHANNEL_ID_KEY = "slackChannelId"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class NotificationValidator:
    """Validates a notification against the requirements of a channel."""

    _CHANNEL_RULES: dict[ChannelType, str] = {
        ChannelType.EMAIL: "_validate_email_channel",
        ChannelType.SMS: "_validate_sms_channel",
        ChannelType.PUSH: "_validate_push_channel",
        ChannelType.SLACK: "_validate_slack_channel",
    }

    def __init__(
        self,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def validate(self, notification: "Notification", channel: ChannelType) -> None:
        """Validate notification for channel.

        Raises:
            InvalidArgumentError: If notification or channel is None.
            NotificationValidationError: On the first violated precondition.
        """
        if notification is None:
            raise InvalidArgumentError("notification must not be None")
        if channel is None:
            raise InvalidArgumentError("channel must not be None")

        self._logger.debug(
            "validation_started",
            notification_id=str(notification.id),
            channel=channel.value,
        )
        if _is_blank(notification.message):
            self._fail("empty message: notification message must not be None or blank", channel)
        if notification.recipient is None:
            self._fail("missing recipient: notification recipient must not be None", channel)

        rule = getattr(self, self._CHANNEL_RULES[channel])
        rule(notification.recipient)
        self._logger.debug(
            "validation_passed",
            notification_id=str(notification.id),
            channel=channel.value,
        )

    def _validate_email_channel(self, recipient: "Recipient") -> None:
        email = recipient.email
        if _is_blank(email):
            self._fail("missing email: EMAIL channel requires a recipient email", ChannelType.EMAIL)
        if not self.is_valid_email(email):
            self._fail(
                f"invalid email: '{email}' is not a valid email address",
                ChannelType.EMAIL,
                email_masked=mask_email(email),
            )

    def _validate_sms_channel(self, recipient: "Recipient") -> None:
        phone = recipient.phone
        if _is_blank(phone):
            self._fail("missing phone: SMS channel requires a recipient phone", ChannelType.SMS)
        if not self.is_valid_phone(phone):
            self._fail(
                f"invalid phone: '{phone}' is not an E.164 number (8-15 digits)",
                ChannelType.SMS,
                phone_masked=mask_phone(phone),
            )

    def _validate_push_channel(self, recipient: "Recipient") -> None:
        if _is_blank(recipient.metadata_value(DEVICE_TOKEN_KEY)):
            self._fail(
                f"missing {DEVICE_TOKEN_KEY}: PUSH channel requires a non-blank "
                f"'{DEVICE_TOKEN_KEY}' in recipient metadata",
                ChannelType.PUSH,
            )

    def _validate_slack_channel(self, recipient: "Recipient") -> None:
        if _is_blank(recipient.metadata_value(SLACK_CHANNEL_ID_KEY)):
            self._fail(
                f"missing {SLACK_CHANNEL_ID_KEY}: SLACK channel requires a non-blank "
                f"'{SLACK_CHANNEL_ID_KEY}' in recipient metadata",
                ChannelType.SLACK,
            )

    def _fail(self, reason: str, channel: ChannelType, **context: Any) -> NoReturn:
        self._logger.error("validation_failed", channel=channel.value, reason=reason, **context)
        raise NotificationValidationError(reason)

    @staticmethod
    def is_valid_email(email: Any) -> bool:
        """Return True if email matches the accepted address grammar (max 254 chars)."""
        if not isinstance(email, str) or not email.strip():
            return False
        candidate = email.strip()
        if len(candidate) > _EMAIL_MAX_LENGTH:
            return False
        return _EMAIL_PATTERN.fullmatch(candidate) is not None

    @staticmethod
    def is_valid_phone(phone: Any) -> bool:
        """Return True if phone is E.164-like after removing spaces, hyphens and parentheses."""
        if not isinstance(phone, str) or not phone.strip():
            return False
        normalized = _PHONE_STRIP_PATTERN.sub("", phone.strip())
        return _PHONE_PATTERN.fullmatch(normalized) is not None


_uncovered = set(ChannelType) - set(NotificationValidator._CHANNEL_RULES)
if _uncovered:
    raise RuntimeError(
        "NotificationValidator has no rule for channel(s): "
        + ", ".join(sorted(c.value for c in _uncovered))
    )
