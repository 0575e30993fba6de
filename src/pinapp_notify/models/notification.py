# -*- coding: utf-8 -*-
"""Notification: the value object submitted to NotificationService.

Immutable after construction. Template expansion produces a new instance via
with_message(); template_variables are carried over untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Optional
from uuid import UUID, uuid4

from pinapp_notify.exceptions import InvalidArgumentError
from pinapp_notify.models.channel import NotificationPriority
from pinapp_notify.models.recipient import Recipient


@dataclass(frozen=True, slots=True)
class Notification:
    """A message addressed to a recipient, with optional template variables.

    template_variables is None when no template context was supplied; an empty
    mapping is a present-but-empty context (placeholders expand to "").
    """

    id: UUID
    recipient: Recipient
    message: str
    priority: NotificationPriority = NotificationPriority.NORMAL
    template_variables: Optional[Mapping[str, str]] = field(default=None)

    def __post_init__(self) -> None:
        if self.priority is None:
            object.__setattr__(self, "priority", NotificationPriority.NORMAL)
        variables = self.template_variables
        if variables is not None and not isinstance(variables, MappingProxyType):
            object.__setattr__(self, "template_variables", MappingProxyType(dict(variables)))

    @property
    def has_template_variables(self) -> bool:
        """True if a template context is attached (even an empty one)."""
        return self.template_variables is not None

    def with_message(self, message: str) -> Notification:
        """Return a copy with a different message body (same id, recipient, priority, variables)."""
        return replace(self, message=message)

    @classmethod
    def create(
        cls,
        recipient: Recipient,
        message: str,
        *,
        priority: Optional[NotificationPriority] = None,
        template_variables: Optional[Mapping[str, Any]] = None,
        id: Optional[UUID] = None,
    ) -> Notification:
        """Create a notification with a generated id and NORMAL priority by default.

        Raises:
            InvalidArgumentError: If recipient is None or message is None/blank.
        """
        if recipient is None:
            raise InvalidArgumentError("recipient must not be None")
        if message is None or not message.strip():
            raise InvalidArgumentError("message must not be None or blank")
        return cls(
            id=id or uuid4(),
            recipient=recipient,
            message=message,
            priority=priority or NotificationPriority.NORMAL,
            template_variables=template_variables,
        )
