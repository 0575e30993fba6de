"""Exceptions subpackage."""

from pinapp_notify.exceptions.exceptions import (
    NO_PROVIDER,
    InvalidArgumentError,
    MissingProviderConfigError,
    NotificationError,
    NotificationValidationError,
    ProviderError,
)

__all__ = [
    "NO_PROVIDER",
    "InvalidArgumentError",
    "MissingProviderConfigError",
    "NotificationError",
    "NotificationValidationError",
    "ProviderError",
]
