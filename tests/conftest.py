# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock
from uuid import UUID

import pytest

from pinapp_notify.models import Notification, NotificationPriority, Recipient


class FakeEventBus:
    """Minimal in-process event bus: records dispatched events and calls handlers inline."""

    def __init__(self) -> None:
        self.handlers: dict[str, list[Any]] = {}
        self.dispatched: list[Any] = []

    def on(self, event_type: type[Any], handler: Any) -> None:
        key = event_type.__name__
        self.handlers.setdefault(key, []).append(handler)

    def dispatch(self, event: Any) -> None:
        self.dispatched.append(event)
        for handler in self.handlers.get(type(event).__name__, []):
            handler(event)


@pytest.fixture
def fake_event_bus() -> FakeEventBus:
    """Fresh fake event bus per test."""
    return FakeEventBus()


@pytest.fixture
def logger() -> MagicMock:
    """Recording logger; bind() returns the same mock so bound calls are visible too."""
    mock = MagicMock()
    mock.bind.return_value = mock
    return mock


@pytest.fixture
def get_logger(logger: MagicMock) -> Callable[[str], Any]:
    """Logger factory that always hands out the recording logger."""
    return lambda name: logger


@pytest.fixture
def notification_id() -> UUID:
    return UUID("7d1f3c2a-9b4e-4c61-8a55-0f3e2d1c4b6a")


@pytest.fixture
def recipient_factory() -> Callable[..., Recipient]:
    """Build Recipient with an email + subject by default and easy overrides."""

    def _build(**overrides: Any) -> Recipient:
        return Recipient.create(
            email=overrides.pop("email", "ana.perez@example.com"),
            phone=overrides.pop("phone", None),
            metadata=overrides.pop("metadata", {"subject": "Hi"}),
        )

    return _build


@pytest.fixture
def notification_factory(
    recipient_factory: Callable[..., Recipient],
) -> Callable[..., Notification]:
    """Build Notification with sensible defaults; pass recipient=... or recipient fields."""

    def _build(**overrides: Any) -> Notification:
        recipient = overrides.pop("recipient", None)
        if recipient is None:
            recipient = recipient_factory(
                **{k: overrides.pop(k) for k in ("email", "phone", "metadata") if k in overrides}
            )
        return Notification.create(
            recipient,
            overrides.pop("message", "Hello there"),
            priority=overrides.pop("priority", NotificationPriority.NORMAL),
            template_variables=overrides.pop("template_variables", None),
            id=overrides.pop("id", None),
        )

    return _build
