# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, EMAIL__API_KEY.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "pinapp-notify"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/pinapp_notify.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class EmailProviderSettings(BaseSettings):
    """Email provider (from env EMAIL__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = True
    api_key: Optional[str] = Field(default=None, description="Email gateway API key.")
    sender: str = Field(default="no-reply@pinapp.local", description="From address.")


class SmsProviderSettings(BaseSettings):
    """SMS provider (from env SMS__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = True
    api_key: Optional[str] = Field(default=None, description="SMS gateway API key.")
    sender_id: str = Field(default="PinApp", description="Alphanumeric sender id.")


class PushProviderSettings(BaseSettings):
    """Push provider (from env PUSH__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = True
    server_key: Optional[str] = Field(default=None, description="Push service server key.")
    application_id: str = Field(default="com.pinapp.default", description="Target application id.")


class SlackProviderSettings(BaseSettings):
    """Slack provider (from env SLACK__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = False
    bot_token: Optional[str] = Field(default=None, description="Slack bot token.")
    workspace: str = Field(default="pinapp", description="Slack workspace name.")


class DispatchSettings(BaseSettings):
    """NotificationService dispatch behaviour (from env DISPATCH__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    max_workers: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Worker threads used by send_async.",
    )
    require_full_coverage: bool = Field(
        default=False,
        description="Fail at startup when a channel has no provider instead of logging a warning.",
    )
    events_enabled: bool = Field(
        default=True,
        description="Publish NotificationSentEvent/NotificationFailedEvent on the event bus.",
    )
    event_history_size: int = Field(
        default=100,
        ge=1,
        le=10_000,
        description="Events kept in the bus history.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, DISPATCH__MAX_WORKERS.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    email: EmailProviderSettings = Field(default_factory=EmailProviderSettings)
    sms: SmsProviderSettings = Field(default_factory=SmsProviderSettings)
    push: PushProviderSettings = Field(default_factory=PushProviderSettings)
    slack: SlackProviderSettings = Field(default_factory=SlackProviderSettings)
    dispatch: DispatchSettings = Field(default_factory=DispatchSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides are passed as nested dicts, e.g.
        from_env(dispatch={"max_workers": 8}).
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from pinapp_notify.config import get_settings

        settings = get_settings()
        workers = settings.dispatch.max_workers
    """
    return Settings()
