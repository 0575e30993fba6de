# -*- coding: utf-8 -*-
"""NotificationResult: outcome of a single send, produced by providers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from pinapp_notify.models.channel import ChannelType


@dataclass(frozen=True, slots=True)
class NotificationResult:
    """Outcome of sending one notification through one provider.

    Build with succeeded() or failed(); error_message is set only on failure.
    """

    notification_id: UUID
    success: bool
    provider_name: str
    channel: ChannelType
    timestamp: datetime
    error_message: Optional[str] = None

    @classmethod
    def succeeded(
        cls,
        notification_id: UUID,
        provider_name: str,
        channel: ChannelType,
        *,
        timestamp: Optional[datetime] = None,
    ) -> NotificationResult:
        return cls(
            notification_id=notification_id,
            success=True,
            provider_name=provider_name,
            channel=channel,
            timestamp=timestamp or datetime.now(UTC),
            error_message=None,
        )

    @classmethod
    def failed(
        cls,
        notification_id: UUID,
        provider_name: str,
        channel: ChannelType,
        error_message: str,
        *,
        timestamp: Optional[datetime] = None,
    ) -> NotificationResult:
        return cls(
            notification_id=notification_id,
            success=False,
            provider_name=provider_name,
            channel=channel,
            timestamp=timestamp or datetime.now(UTC),
            error_message=error_message,
        )
