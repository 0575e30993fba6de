"""Configuration subpackage."""

from pinapp_notify.config.config import (
    AppSettings,
    DispatchSettings,
    EmailProviderSettings,
    LoggingSettings,
    PushProviderSettings,
    Settings,
    SlackProviderSettings,
    SmsProviderSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "DispatchSettings",
    "EmailProviderSettings",
    "LoggingSettings",
    "PushProviderSettings",
    "Settings",
    "SlackProviderSettings",
    "SmsProviderSettings",
    "get_settings",
]
