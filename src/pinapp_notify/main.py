# -*- coding: utf-8 -*-
"""
Demo entry point for pinapp-notify.

Configures logging, builds the container, sends one notification per channel
synchronously and again through send_async, then logs the delivery stats.

Run with: python -m pinapp_notify.main

Notebook usage:
    from pinapp_notify.main import run
    await run()
"""
from __future__ import annotations

import asyncio
from typing import Any

import structlog

from pinapp_notify.DI import Container
from pinapp_notify.exceptions import NotificationError
from pinapp_notify.logging.config import configure_logging
from pinapp_notify.models import ChannelType, Notification, NotificationPriority, Recipient
from pinapp_notify.validation import DEVICE_TOKEN_KEY, SLACK_CHANNEL_ID_KEY


def _demo_notifications() -> list[tuple[Notification, ChannelType]]:
    email_recipient = Recipient.create(
        email="ana.perez@example.com",
        metadata={"subject": "Welcome to PinApp"},
    )
    sms_recipient = Recipient.create(phone="+5491122334455")
    push_recipient = Recipient.create(
        metadata={DEVICE_TOKEN_KEY: "fcm-token-0123456789abcdef", "title": "PinApp"},
    )
    slack_recipient = Recipient.create(metadata={SLACK_CHANNEL_ID_KEY: "C0123456789"})

    return [
        (
            Notification.create(
                email_recipient,
                "Hello {{name}}, your account is ready.",
                template_variables={"name": "Ana"},
            ),
            ChannelType.EMAIL,
        ),
        (
            Notification.create(
                sms_recipient,
                "Your verification code is {{otp}}",
                priority=NotificationPriority.HIGH,
                template_variables={"otp": "482913"},
            ),
            ChannelType.SMS,
        ),
        (
            Notification.create(push_recipient, "You have a new message"),
            ChannelType.PUSH,
        ),
        (
            Notification.create(
                slack_recipient,
                "Deploy {{version}} finished",
                template_variables={"version": "1.4.2"},
            ),
            ChannelType.SLACK,
        ),
    ]


def _send_sync(service: Any, logger: Any) -> None:
    for notification, channel in _demo_notifications():
        try:
            result = service.send(notification, channel)
        except NotificationError as exc:
            logger.warning(
                "main_sync_send_failed",
                channel=channel.value,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            continue
        logger.info(
            "main_sync_send_completed",
            channel=channel.value,
            success=result.success,
            provider_name=result.provider_name,
        )


async def _send_async(service: Any, logger: Any) -> None:
    batch = _demo_notifications()
    # Channel omitted: inferred from the recipient (SLACK is never inferred).
    futures = [service.send_async(notification) for notification, _ in batch]
    outcomes = await asyncio.gather(*futures, return_exceptions=True)
    for (notification, _), outcome in zip(batch, outcomes):
        if isinstance(outcome, Exception):
            logger.warning(
                "main_async_send_failed",
                notification_id=str(notification.id),
                error_type=type(outcome).__name__,
                error_message=str(outcome),
            )
            continue
        logger.info(
            "main_async_send_completed",
            notification_id=str(notification.id),
            channel=outcome.channel.value,
            success=outcome.success,
            provider_name=outcome.provider_name,
        )


async def run() -> None:
    configure_logging()
    logger = structlog.get_logger("main")

    container = Container()
    service = container.notification_service()
    stats = container.delivery_stats()
    if stats is not None:
        stats.start()

    try:
        _send_sync(service, logger)
        await _send_async(service, logger)

        event_bus = container.event_bus()
        if event_bus is not None:
            await event_bus.wait_until_idle()
    finally:
        service.shutdown()

    if stats is not None:
        for channel, channel_stats in sorted(stats.snapshot().items(), key=lambda item: item[0].value):
            logger.info(
                "main_delivery_stats",
                channel=channel.value,
                sent=channel_stats.sent,
                failed=channel_stats.failed,
            )
        stats.stop()
    logger.info("main_shutdown_complete")


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
