# -*- coding: utf-8 -*-
"""DeliveryStatsCollector: counts delivery events per channel."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

import structlog

from pinapp_notify.events.delivery_events import NotificationFailedEvent, NotificationSentEvent
from pinapp_notify.models.channel import ChannelType

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]


@dataclass(frozen=True, slots=True)
class ChannelDeliveryStats:
    """Sent/failed counters for one channel."""

    sent: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.sent + self.failed


class DeliveryStatsCollector:
    """Subscribes to NotificationSentEvent / NotificationFailedEvent and keeps counters."""

    def __init__(
        self,
        event_bus: Any,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._event_bus: "EventBus" = event_bus
        self._lock = threading.Lock()
        self._sent: dict[ChannelType, int] = {}
        self._failed: dict[ChannelType, int] = {}
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def start(self) -> None:
        """Subscribe to delivery events."""
        self._event_bus.on(NotificationSentEvent, self._on_sent)
        self._event_bus.on(NotificationFailedEvent, self._on_failed)
        self._logger.debug("delivery_stats_collector_started")

    def stop(self) -> None:
        """Unsubscribe from delivery events."""
        handlers = getattr(self._event_bus, "handlers", {})
        for event_type, handler in (
            (NotificationSentEvent, self._on_sent),
            (NotificationFailedEvent, self._on_failed),
        ):
            key = event_type.__name__
            if key in handlers:
                handlers[key] = [h for h in handlers[key] if h != handler]
        self._logger.debug("delivery_stats_collector_stopped")

    def snapshot(self) -> dict[ChannelType, ChannelDeliveryStats]:
        """Return counters for every channel seen so far."""
        with self._lock:
            channels = set(self._sent) | set(self._failed)
            return {
                channel: ChannelDeliveryStats(
                    sent=self._sent.get(channel, 0),
                    failed=self._failed.get(channel, 0),
                )
                for channel in channels
            }

    def for_channel(self, channel: ChannelType) -> ChannelDeliveryStats:
        with self._lock:
            return ChannelDeliveryStats(
                sent=self._sent.get(channel, 0),
                failed=self._failed.get(channel, 0),
            )

    @property
    def total_sent(self) -> int:
        with self._lock:
            return sum(self._sent.values())

    @property
    def total_failed(self) -> int:
        with self._lock:
            return sum(self._failed.values())

    def reset(self) -> None:
        with self._lock:
            self._sent.clear()
            self._failed.clear()

    def _on_sent(self, event: NotificationSentEvent) -> None:
        channel = ChannelType(event.channel)
        with self._lock:
            self._sent[channel] = self._sent.get(channel, 0) + 1
        self._logger.debug(
            "delivery_stats_sent_recorded",
            channel=channel.value,
            provider_name=event.provider_name,
        )

    def _on_failed(self, event: NotificationFailedEvent) -> None:
        channel = ChannelType(event.channel)
        with self._lock:
            self._failed[channel] = self._failed.get(channel, 0) + 1
        self._logger.debug(
            "delivery_stats_failed_recorded",
            channel=channel.value,
            provider_name=event.provider_name,
            error_message=event.error_message,
        )
