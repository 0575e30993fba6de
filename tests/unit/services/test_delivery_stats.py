# -*- coding: utf-8 -*-
"""Unit tests for DeliveryStatsCollector."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from uuid import uuid4

from pinapp_notify.events import NotificationFailedEvent, NotificationSentEvent
from pinapp_notify.models import ChannelType, Notification
from pinapp_notify.providers import MockNotificationProvider, ProviderRegistry
from pinapp_notify.services import ChannelDeliveryStats, DeliveryStatsCollector, NotificationService


def _sent(channel: ChannelType) -> NotificationSentEvent:
    return NotificationSentEvent(notification_id=uuid4(), provider_name="P", channel=channel)


def _failed(channel: ChannelType) -> NotificationFailedEvent:
    return NotificationFailedEvent(
        notification_id=uuid4(),
        provider_name="P",
        channel=channel,
        error_message="boom",
    )


def test_start_subscribes_and_counts_per_channel(
    fake_event_bus: Any,
    get_logger: Callable[[str], Any],
) -> None:
    collector = DeliveryStatsCollector(fake_event_bus, get_logger=get_logger)
    collector.start()

    fake_event_bus.dispatch(_sent(ChannelType.EMAIL))
    fake_event_bus.dispatch(_sent(ChannelType.EMAIL))
    fake_event_bus.dispatch(_failed(ChannelType.SMS))

    assert collector.snapshot() == {
        ChannelType.EMAIL: ChannelDeliveryStats(sent=2, failed=0),
        ChannelType.SMS: ChannelDeliveryStats(sent=0, failed=1),
    }
    assert collector.total_sent == 2
    assert collector.total_failed == 1
    assert collector.for_channel(ChannelType.PUSH).total == 0


def test_stop_unsubscribes_handlers(
    fake_event_bus: Any,
    get_logger: Callable[[str], Any],
) -> None:
    collector = DeliveryStatsCollector(fake_event_bus, get_logger=get_logger)
    collector.start()
    collector.stop()

    fake_event_bus.dispatch(_sent(ChannelType.EMAIL))

    assert collector.snapshot() == {}
    assert fake_event_bus.handlers["NotificationSentEvent"] == []
    assert fake_event_bus.handlers["NotificationFailedEvent"] == []


def test_reset_clears_counters(fake_event_bus: Any, get_logger: Callable[[str], Any]) -> None:
    collector = DeliveryStatsCollector(fake_event_bus, get_logger=get_logger)
    collector.start()
    fake_event_bus.dispatch(_failed(ChannelType.PUSH))

    collector.reset()

    assert collector.total_failed == 0


async def test_collects_events_published_by_service(
    fake_event_bus: Any,
    get_logger: Callable[[str], Any],
    notification_factory: Callable[..., Notification],
) -> None:
    collector = DeliveryStatsCollector(fake_event_bus, get_logger=get_logger)
    collector.start()
    registry = ProviderRegistry(
        [
            MockNotificationProvider.for_email(),
            MockNotificationProvider.for_sms(should_succeed=False),
        ],
        get_logger=get_logger,
    )
    service = NotificationService(registry, event_bus=fake_event_bus, get_logger=get_logger)

    service.send(notification_factory(), ChannelType.EMAIL)
    service.send(notification_factory(phone="+5491122334455"), ChannelType.SMS)

    assert collector.for_channel(ChannelType.EMAIL) == ChannelDeliveryStats(sent=1, failed=0)
    assert collector.for_channel(ChannelType.SMS) == ChannelDeliveryStats(sent=0, failed=1)
