# -*- coding: utf-8 -*-
"""Recipient: contact data for a notification.

Which contact field is required depends on the channel; that is checked by
NotificationValidator at send time, not here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

_EMPTY_METADATA: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Recipient:
    """Who receives a notification.

    metadata carries channel-specific keys (deviceToken, slackChannelId, subject, ...).
    It is always a read-only mapping; None is normalized to an empty mapping.
    """

    email: Optional[str] = None
    phone: Optional[str] = None
    metadata: Mapping[str, str] = field(default_factory=lambda: _EMPTY_METADATA)

    def __post_init__(self) -> None:
        if self.metadata is None:
            object.__setattr__(self, "metadata", _EMPTY_METADATA)
        elif not isinstance(self.metadata, MappingProxyType):
            object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def create(
        cls,
        *,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> Recipient:
        """Create a recipient; blank contact fields are stored as given."""
        return cls(email=email, phone=phone, metadata=metadata or _EMPTY_METADATA)

    def metadata_value(self, key: str) -> Optional[str]:
        return self.metadata.get(key)
