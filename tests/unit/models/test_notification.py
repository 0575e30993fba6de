# -*- coding: utf-8 -*-
"""Unit tests for Recipient, Notification and NotificationResult value objects."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from datetime import datetime, timezone
from uuid import UUID

import pytest

from pinapp_notify.exceptions import InvalidArgumentError
from pinapp_notify.models import (
    ChannelType,
    Notification,
    NotificationPriority,
    NotificationResult,
    Recipient,
)


def test_recipient_normalizes_missing_metadata_to_empty_mapping() -> None:
    recipient = Recipient(email="a@b.com", metadata=None)  # type: ignore[arg-type]

    assert dict(recipient.metadata) == {}
    assert recipient.metadata_value("subject") is None


def test_recipient_metadata_is_a_read_only_copy() -> None:
    source = {"deviceToken": "tok"}
    recipient = Recipient.create(metadata=source)
    source["deviceToken"] = "changed"

    assert recipient.metadata["deviceToken"] == "tok"
    with pytest.raises(TypeError):
        recipient.metadata["deviceToken"] = "x"  # type: ignore[index]


def test_recipient_defaults_to_empty_read_only_metadata() -> None:
    first = Recipient()
    second = Recipient(email="a@b.com")

    assert dict(first.metadata) == {}
    assert first.metadata_value("deviceToken") is None
    assert second.metadata == first.metadata
    with pytest.raises(TypeError):
        first.metadata["deviceToken"] = "x"  # type: ignore[index]


def test_recipient_is_frozen() -> None:
    recipient = Recipient.create(email="a@b.com")

    with pytest.raises(dataclasses.FrozenInstanceError):
        recipient.email = "c@d.com"  # type: ignore[misc]


def test_create_generates_id_and_defaults_priority_to_normal(
    recipient_factory: Callable[..., Recipient],
) -> None:
    notification = Notification.create(recipient_factory(), "Hello")

    assert isinstance(notification.id, UUID)
    assert notification.priority == NotificationPriority.NORMAL
    assert notification.template_variables is None
    assert notification.has_template_variables is False


def test_create_keeps_given_id(
    recipient_factory: Callable[..., Recipient],
    notification_id: UUID,
) -> None:
    notification = Notification.create(recipient_factory(), "Hello", id=notification_id)

    assert notification.id == notification_id


def test_create_raises_when_recipient_is_none() -> None:
    with pytest.raises(InvalidArgumentError, match="recipient must not be None"):
        Notification.create(None, "Hello")  # type: ignore[arg-type]


@pytest.mark.parametrize("message", [None, "", "   "])
def test_create_raises_when_message_is_blank(
    recipient_factory: Callable[..., Recipient],
    message: str | None,
) -> None:
    with pytest.raises(InvalidArgumentError):
        Notification.create(recipient_factory(), message)  # type: ignore[arg-type]


def test_invalid_argument_error_is_a_value_error(
    recipient_factory: Callable[..., Recipient],
) -> None:
    with pytest.raises(ValueError):
        Notification.create(recipient_factory(), "")


def test_empty_template_variables_are_kept_distinct_from_none(
    notification_factory: Callable[..., Notification],
) -> None:
    notification = notification_factory(template_variables={})

    assert notification.template_variables is not None
    assert notification.has_template_variables is True


def test_template_variables_are_copied_and_read_only(
    notification_factory: Callable[..., Notification],
) -> None:
    variables = {"name": "Sam"}
    notification = notification_factory(template_variables=variables)
    variables["name"] = "Other"

    assert notification.template_variables is not None
    assert notification.template_variables["name"] == "Sam"
    with pytest.raises(TypeError):
        notification.template_variables["name"] = "x"  # type: ignore[index]


def test_with_message_returns_new_instance_with_same_identity(
    notification_factory: Callable[..., Notification],
) -> None:
    original = notification_factory(
        message="Hello {{name}}",
        priority=NotificationPriority.HIGH,
        template_variables={"name": "Sam"},
    )

    updated = original.with_message("Hello Sam")

    assert updated is not original
    assert original.message == "Hello {{name}}"
    assert updated.message == "Hello Sam"
    assert updated.id == original.id
    assert updated.recipient == original.recipient
    assert updated.priority == NotificationPriority.HIGH
    assert updated.template_variables == original.template_variables


def test_result_succeeded_has_no_error_message(notification_id: UUID) -> None:
    result = NotificationResult.succeeded(notification_id, "EmailProvider", ChannelType.EMAIL)

    assert result.success is True
    assert result.error_message is None
    assert result.notification_id == notification_id
    assert result.channel == ChannelType.EMAIL
    assert result.timestamp.tzinfo is not None


def test_result_failed_carries_error_message_and_timestamp(notification_id: UUID) -> None:
    at = datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)

    result = NotificationResult.failed(
        notification_id, "SmsProvider", ChannelType.SMS, "gateway down", timestamp=at
    )

    assert result.success is False
    assert result.error_message == "gateway down"
    assert result.provider_name == "SmsProvider"
    assert result.timestamp == at
