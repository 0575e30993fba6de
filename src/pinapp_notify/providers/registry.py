# -*- coding: utf-8 -*-
"""ProviderRegistry: selects the provider for a channel and dispatches to it.

Selection is first-match in registration order. Registering a second provider
for an already covered channel is allowed but logged as a warning, since the
later provider will never be selected for that channel.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Optional

import structlog

from pinapp_notify.exceptions import (
    NO_PROVIDER,
    InvalidArgumentError,
    MissingProviderConfigError,
    ProviderError,
)
from pinapp_notify.models.channel import ChannelType

if TYPE_CHECKING:
    from pinapp_notify.models.notification import Notification
    from pinapp_notify.models.notification_result import NotificationResult
    from pinapp_notify.providers.base import NotificationProvider


class ProviderRegistry:
    """Ordered set of providers; dispatches a notification to the first that supports a channel."""

    def __init__(
        self,
        providers: Iterable["NotificationProvider"] = (),
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._providers: tuple["NotificationProvider", ...] = ()
        for provider in providers:
            self.register(provider)

    @property
    def providers(self) -> tuple["NotificationProvider", ...]:
        """Registered providers in registration order."""
        return self._providers

    def register(self, provider: "NotificationProvider") -> None:
        """Append provider. Channels already covered keep their first provider.

        Raises:
            InvalidArgumentError: If provider is None.
        """
        if provider is None:
            raise InvalidArgumentError("provider must not be None")
        for channel in ChannelType:
            if not provider.supports(channel):
                continue
            existing = self.find(channel)
            if existing is not None:
                self._logger.warning(
                    "provider_channel_shadowed",
                    channel=channel.value,
                    selected_provider=existing.name,
                    shadowed_provider=provider.name,
                )
        self._providers = (*self._providers, provider)
        self._logger.debug(
            "provider_registered",
            provider_name=provider.name,
            providers_count=len(self._providers),
        )

    def find(self, channel: ChannelType) -> Optional["NotificationProvider"]:
        """Return the first registered provider supporting channel, or None."""
        for provider in self._providers:
            if provider.supports(channel):
                return provider
        return None

    def has_provider(self, channel: ChannelType) -> bool:
        return self.find(channel) is not None

    def uncovered_channels(self) -> set[ChannelType]:
        """Channels no registered provider supports."""
        return {channel for channel in ChannelType if not self.has_provider(channel)}

    def check_coverage(self, *, strict: bool = False) -> set[ChannelType]:
        """Report channels without a provider.

        Returns:
            The uncovered channels (empty when every channel has a provider).

        Raises:
            MissingProviderConfigError: If strict and at least one channel is uncovered.
        """
        uncovered = self.uncovered_channels()
        if not uncovered:
            return uncovered
        names = sorted(channel.value for channel in uncovered)
        if strict:
            raise MissingProviderConfigError(
                f"no provider registered for channel(s) {', '.join(names)}"
            )
        self._logger.warning("provider_channels_uncovered", channels=names)
        return uncovered

    def dispatch(self, notification: "Notification", channel: ChannelType) -> "NotificationResult":
        """Send notification with the provider selected for channel.

        The provider's result (success or failure) and any ProviderError it raises
        are returned/propagated unchanged.

        Raises:
            ProviderError: If no provider supports channel, or the provider fails.
        """
        provider = self.find(channel)
        if provider is None:
            self._logger.error(
                "provider_not_found",
                notification_id=str(notification.id),
                channel=channel.value,
            )
            raise ProviderError(
                f"no provider registered for channel {channel.value}",
                provider_name=NO_PROVIDER,
            )
        self._logger.debug(
            "provider_selected",
            notification_id=str(notification.id),
            channel=channel.value,
            provider_name=provider.name,
        )
        return provider.send(notification)
