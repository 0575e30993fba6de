# -*- coding: utf-8 -*-
"""Unit tests for the DI container wiring."""

from __future__ import annotations

from typing import Any

import pytest
from bubus import EventBus  # type: ignore[import-untyped]
from dependency_injector import providers

from pinapp_notify.config import Settings
from pinapp_notify.DI import Container
from pinapp_notify.exceptions import MissingProviderConfigError
from pinapp_notify.models import ChannelType
from pinapp_notify.services import DeliveryStatsCollector, NotificationService


def _container(**overrides: Any) -> Container:
    container = Container()
    container.config.override(providers.Object(Settings.from_env(**overrides)))
    return container


def test_registry_contains_enabled_providers_in_channel_order() -> None:
    container = _container(slack={"enabled": True}, dispatch={"events_enabled": False})

    registry = container.provider_registry()

    assert [p.name for p in registry.providers] == [
        "EmailProvider",
        "SmsProvider",
        "PushProvider",
        "SlackProvider",
    ]
    assert registry.uncovered_channels() == set()


def test_disabled_providers_are_left_out() -> None:
    container = _container(sms={"enabled": False}, dispatch={"events_enabled": False})

    registry = container.provider_registry()

    assert registry.has_provider(ChannelType.SMS) is False


def test_no_enabled_provider_raises() -> None:
    container = _container(
        email={"enabled": False},
        sms={"enabled": False},
        push={"enabled": False},
        slack={"enabled": False},
    )

    with pytest.raises(MissingProviderConfigError):
        container.provider_registry()


def test_strict_coverage_raises_for_uncovered_channel() -> None:
    container = _container(dispatch={"require_full_coverage": True, "events_enabled": False})

    with pytest.raises(MissingProviderConfigError, match="SLACK"):
        container.provider_registry()


def test_events_disabled_wires_service_without_bus() -> None:
    container = _container(dispatch={"events_enabled": False, "max_workers": 2})

    service = container.notification_service()

    assert isinstance(service, NotificationService)
    assert container.event_bus() is None
    assert container.delivery_stats() is None
    assert container.notification_service() is service


def test_events_enabled_builds_one_bus_shared_with_stats_collector() -> None:
    container = _container(dispatch={"event_history_size": 25})

    bus = container.event_bus()
    stats = container.delivery_stats()

    assert isinstance(bus, EventBus)
    assert container.event_bus() is bus
    assert isinstance(stats, DeliveryStatsCollector)
