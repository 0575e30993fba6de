"""Error taxonomy for notification sending."""

from __future__ import annotations

NO_PROVIDER = "none"
"""Provider name used when no provider could be selected for a channel."""


class NotificationError(Exception):
    """Base exception for notification-related errors."""

    pass


class InvalidArgumentError(NotificationError, ValueError):
    """Raised when a required input (notification, channel, recipient, template) is missing."""

    pass


class NotificationValidationError(NotificationError):
    """Raised when a notification does not satisfy the preconditions of its channel."""

    pass


class ProviderError(NotificationError):
    """Raised when a provider cannot process a notification (or none is registered)."""

    def __init__(
        self,
        message: str,
        *,
        provider_name: str = NO_PROVIDER,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.provider_name = provider_name
        self.reason = message
        self.cause = cause


class MissingProviderConfigError(ProviderError):
    """Raised when provider configuration leaves channels (or everything) uncovered."""

    pass
