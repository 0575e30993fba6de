"""Utility modules."""

from pinapp_notify.utils.masking import (
    mask_email,
    mask_phone,
    mask_secret,
    mask_token,
    truncate_message,
)

__all__ = ["mask_email", "mask_phone", "mask_secret", "mask_token", "truncate_message"]
