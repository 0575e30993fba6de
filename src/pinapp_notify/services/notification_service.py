# -*- coding: utf-8 -*-
"""NotificationService: public entry point for sending notifications.

Pipeline (always in this order): resolve channel -> validate -> expand template
-> dispatch to provider -> return the provider's result. send_async runs the same
pipeline on a worker thread and returns an asyncio future.
"""

from __future__ import annotations

import asyncio
import functools
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, Optional

import structlog

from pinapp_notify.events.delivery_events import NotificationFailedEvent, NotificationSentEvent
from pinapp_notify.exceptions import (
    InvalidArgumentError,
    NotificationValidationError,
    ProviderError,
)
from pinapp_notify.models.channel import ChannelType
from pinapp_notify.templating.template_engine import TemplateEngine
from pinapp_notify.validation.notification_validator import (
    DEVICE_TOKEN_KEY,
    NotificationValidator,
)

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from pinapp_notify.models.notification import Notification
    from pinapp_notify.models.notification_result import NotificationResult
    from pinapp_notify.providers.registry import ProviderRegistry


def _has_text(value: Optional[str]) -> bool:
    return bool(value and value.strip())


class NotificationService:
    """Validates, templates and dispatches notifications to the registered providers."""

    def __init__(
        self,
        registry: "ProviderRegistry",
        *,
        validator: Optional[NotificationValidator] = None,
        template_engine: Optional[TemplateEngine] = None,
        event_bus: Optional["EventBus"] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        max_workers: Optional[int] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the service.

        Args:
            registry: Providers to dispatch to (treated as read-only once sending starts).
            validator: Optional; defaults to a new NotificationValidator.
            template_engine: Optional; defaults to a new TemplateEngine.
            event_bus: Optional bubus bus; when set, delivery events are dispatched on it
                whenever an event loop is available (see _publish).
            executor: Optional executor for send_async. Not shut down by shutdown().
            max_workers: Worker count for the executor created lazily when none is given.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        if registry is None:
            raise InvalidArgumentError("registry must not be None")
        self._registry = registry
        self._validator = validator or NotificationValidator(get_logger=get_logger)
        self._template_engine = template_engine or TemplateEngine(get_logger=get_logger)
        self._event_bus = event_bus
        self._executor = executor
        self._owns_executor = executor is None
        self._max_workers = max_workers
        self._executor_lock = threading.Lock()
        self._logger = get_logger(logger_name or self.__class__.__name__)

        uncovered = self._registry.check_coverage()
        self._logger.info(
            "notification_service_initialized",
            providers_count=len(self._registry.providers),
            uncovered_channels=sorted(c.value for c in uncovered),
            events_enabled=event_bus is not None,
        )

    def send(
        self,
        notification: "Notification",
        channel: Optional[ChannelType] = None,
    ) -> "NotificationResult":
        """Send notification synchronously.

        Args:
            notification: Notification to send.
            channel: Target channel; inferred from the recipient when None.

        Returns:
            The provider's result (success or failure) unchanged.

        Raises:
            InvalidArgumentError: If notification is None.
            NotificationValidationError: If validation fails or no channel can be inferred.
            ProviderError: If no provider supports the channel or the provider fails.
        """
        return self._send(notification, channel, None)

    def _send(
        self,
        notification: "Notification",
        channel: Optional[ChannelType],
        event_loop: Optional[asyncio.AbstractEventLoop],
    ) -> "NotificationResult":
        if notification is None:
            raise InvalidArgumentError("notification must not be None")
        log = self._logger.bind(notification_id=str(notification.id))
        log.debug(
            "notification_send_started",
            channel=channel.value if channel is not None else None,
            priority=notification.priority.value,
        )

        try:
            resolved = channel if channel is not None else self.infer_channel(notification)
            self._validator.validate(notification, resolved)
        except NotificationValidationError as exc:
            log.error("notification_validation_failed", channel=_channel_value(channel), reason=str(exc))
            raise

        processed = self._process_template(notification)

        provider = self._registry.find(resolved)
        log.info(
            "notification_dispatched",
            channel=resolved.value,
            provider_name=provider.name if provider is not None else None,
        )
        try:
            result = self._registry.dispatch(processed, resolved)
        except ProviderError as exc:
            log.error(
                "notification_provider_failed",
                channel=resolved.value,
                provider_name=exc.provider_name,
                reason=exc.reason,
            )
            self._emit_failed(processed, exc.provider_name, resolved, exc.reason, event_loop)
            raise

        if result.success:
            log.info("notification_sent", channel=resolved.value, provider_name=result.provider_name)
            self._emit_sent(processed, result.provider_name, resolved, event_loop)
        else:
            log.error(
                "notification_provider_failed",
                channel=resolved.value,
                provider_name=result.provider_name,
                reason=result.error_message,
            )
            self._emit_failed(
                processed,
                result.provider_name,
                resolved,
                result.error_message or "provider reported failure",
                event_loop,
            )
        return result

    def send_async(
        self,
        notification: "Notification",
        channel: Optional[ChannelType] = None,
    ) -> "asyncio.Future[NotificationResult]":
        """Schedule send() on a worker thread; must be called from a running event loop.

        The returned future resolves to the same result send() would return, or
        raises the same exception. Cancelling it only prevents work that has not
        started yet.
        """
        loop = asyncio.get_running_loop()
        self._logger.debug(
            "notification_send_async_scheduled",
            notification_id=str(notification.id) if notification is not None else None,
            channel=_channel_value(channel),
        )
        return loop.run_in_executor(
            self._get_executor(),
            functools.partial(self._send, notification, channel, loop),
        )

    def infer_channel(self, notification: "Notification") -> ChannelType:
        """Pick a channel from the recipient: email, then phone, then deviceToken metadata.

        A contact field only counts when a provider is registered for its channel.

        Raises:
            InvalidArgumentError: If notification is None.
            NotificationValidationError: If no contact field maps to a covered channel.
        """
        if notification is None:
            raise InvalidArgumentError("notification must not be None")
        recipient = notification.recipient
        if recipient is not None:
            candidates = (
                (recipient.email, ChannelType.EMAIL),
                (recipient.phone, ChannelType.SMS),
                (recipient.metadata_value(DEVICE_TOKEN_KEY), ChannelType.PUSH),
            )
            for value, channel in candidates:
                if not _has_text(value):
                    continue
                if not self._registry.has_provider(channel):
                    self._logger.debug(
                        "notification_channel_skipped",
                        notification_id=str(notification.id),
                        channel=channel.value,
                    )
                    continue
                self._logger.info(
                    "notification_channel_inferred",
                    notification_id=str(notification.id),
                    channel=channel.value,
                )
                return channel
        raise NotificationValidationError(
            "cannot infer channel: recipient has no email, phone or deviceToken "
            "for a registered provider"
        )

    def shutdown(self, wait: bool = True) -> None:
        """Release the worker executor created by this service (no-op otherwise)."""
        with self._executor_lock:
            executor = self._executor
            if executor is None or not self._owns_executor:
                return
            self._executor = None
        executor.shutdown(wait=wait)
        self._logger.debug("notification_service_shutdown")

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="pinapp-notify",
                )
                self._owns_executor = True
                self._logger.debug("notification_executor_created", max_workers=self._max_workers)
            return self._executor

    def _process_template(self, notification: "Notification") -> "Notification":
        if not notification.has_template_variables and not self._template_engine.has_variables(
            notification.message
        ):
            return notification
        message = self._template_engine.process(notification.message, notification.template_variables)
        self._logger.debug(
            "notification_template_processed",
            notification_id=str(notification.id),
            changed=message != notification.message,
        )
        return notification.with_message(message)

    def _emit_sent(
        self,
        notification: "Notification",
        provider_name: str,
        channel: ChannelType,
        event_loop: Optional[asyncio.AbstractEventLoop],
    ) -> None:
        if self._event_bus is None:
            return
        event = NotificationSentEvent(
            notification_id=notification.id,
            provider_name=provider_name,
            channel=channel,
            priority=notification.priority,
        )
        self._publish(event, event_loop)

    def _emit_failed(
        self,
        notification: "Notification",
        provider_name: str,
        channel: ChannelType,
        error_message: str,
        event_loop: Optional[asyncio.AbstractEventLoop],
    ) -> None:
        if self._event_bus is None:
            return
        event = NotificationFailedEvent(
            notification_id=notification.id,
            provider_name=provider_name,
            channel=channel,
            priority=notification.priority,
            error_message=error_message,
        )
        self._publish(event, event_loop)

    def _publish(self, event: Any, event_loop: Optional[asyncio.AbstractEventLoop]) -> None:
        """Dispatch event on the bus from the thread that runs its event loop.

        Worker threads hand the event to the loop that scheduled them. A synchronous
        send with no running loop has nowhere to queue the event, so it is skipped.
        """
        if event_loop is not None:
            try:
                event_loop.call_soon_threadsafe(self._dispatch_event, event)
            except RuntimeError as exc:
                self._log_dispatch_error(event, exc)
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            self._logger.debug(
                "notification_event_skipped_no_loop",
                event_type=type(event).__name__,
            )
            return
        self._dispatch_event(event)

    def _dispatch_event(self, event: Any) -> None:
        # A publishing error never changes the outcome of a send.
        try:
            self._event_bus.dispatch(event)
        except Exception as exc:
            self._log_dispatch_error(event, exc)

    def _log_dispatch_error(self, event: Any, exc: Exception) -> None:
        self._logger.error(
            "notification_event_dispatch_failed",
            event_type=type(event).__name__,
            error_type=type(exc).__name__,
            error_message=str(exc),
        )


def _channel_value(channel: Optional[ChannelType]) -> Optional[str]:
    return channel.value if channel is not None else None
