# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from typing import Optional

from bubus import EventBus  # type: ignore[import-untyped]
from dependency_injector import containers, providers

from pinapp_notify.config import Settings, get_settings
from pinapp_notify.exceptions import MissingProviderConfigError
from pinapp_notify.providers import (
    EmailNotificationProvider,
    NotificationProvider,
    ProviderRegistry,
    PushNotificationProvider,
    SlackNotificationProvider,
    SmsNotificationProvider,
)
from pinapp_notify.services import DeliveryStatsCollector, NotificationService
from pinapp_notify.templating import TemplateEngine
from pinapp_notify.validation import NotificationValidator


def _build_providers(settings: Settings) -> list[NotificationProvider]:
    """Instantiate every provider enabled in settings, in channel order."""
    built: list[NotificationProvider] = []
    if settings.email.enabled:
        built.append(
            EmailNotificationProvider(api_key=settings.email.api_key, sender=settings.email.sender)
        )
    if settings.sms.enabled:
        built.append(
            SmsNotificationProvider(api_key=settings.sms.api_key, sender_id=settings.sms.sender_id)
        )
    if settings.push.enabled:
        built.append(
            PushNotificationProvider(
                server_key=settings.push.server_key,
                application_id=settings.push.application_id,
            )
        )
    if settings.slack.enabled:
        built.append(
            SlackNotificationProvider(
                bot_token=settings.slack.bot_token,
                workspace=settings.slack.workspace,
            )
        )
    if not built:
        raise MissingProviderConfigError(
            "no notification provider enabled (set EMAIL__ENABLED, SMS__ENABLED, "
            "PUSH__ENABLED or SLACK__ENABLED)"
        )
    return built


def _build_registry(settings: Settings) -> ProviderRegistry:
    registry = ProviderRegistry(_build_providers(settings))
    if settings.dispatch.require_full_coverage:
        registry.check_coverage(strict=True)
    return registry


def _max_workers(settings: Settings) -> int:
    return settings.dispatch.max_workers


def _build_event_bus(settings: Settings) -> Optional[EventBus]:
    """One bus per container; None when delivery events are disabled."""
    if not settings.dispatch.events_enabled:
        return None
    return EventBus(
        name="PinappNotify",
        max_history_size=settings.dispatch.event_history_size,
        wal_path=None,
    )


def _build_stats_collector(event_bus: Optional[EventBus]) -> Optional[DeliveryStatsCollector]:
    if event_bus is None:
        return None
    return DeliveryStatsCollector(event_bus=event_bus)


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, event bus, providers and the notification service."""

    config = providers.Callable(get_settings)

    event_bus = providers.Singleton(_build_event_bus, config)

    template_engine = providers.Singleton(TemplateEngine)

    validator = providers.Singleton(NotificationValidator)

    provider_registry = providers.Singleton(_build_registry, config)

    notification_service = providers.Singleton(
        NotificationService,
        registry=provider_registry,
        validator=validator,
        template_engine=template_engine,
        event_bus=event_bus,
        max_workers=providers.Callable(_max_workers, config),
    )

    delivery_stats = providers.Singleton(_build_stats_collector, event_bus)
