"""Masking helpers so contact data and secrets can be logged safely."""

from __future__ import annotations

_DEFAULT_MAX_MESSAGE_LENGTH = 100


def mask_secret(secret: str | None) -> str:
    """Return the first 4 chars of a secret followed by *** (or **** if too short/missing)."""
    if not secret or len(secret) <= 4:
        return "****"
    return f"{secret[:4]}***"


def mask_token(token: str | None) -> str:
    """Return a masked device/channel token for logging (e.g. abcd1234...wxyz)."""
    if not token or len(token) < 10:
        return "****"
    return f"{token[:8]}...{token[-4:]}"


def mask_email(email: str | None) -> str:
    """Return a masked email address (e.g. j***@example.com)."""
    if not email or "@" not in email:
        return "***"
    local, _, domain = email.strip().partition("@")
    if not local:
        return f"***@{domain}"
    return f"{local[0]}***@{domain}"


def mask_phone(phone: str | None) -> str:
    """Return a masked phone number keeping the last 4 digits."""
    if not phone:
        return "***"
    digits = [c for c in phone if c.isdigit()]
    if len(digits) < 4:
        return "***"
    return f"***{''.join(digits[-4:])}"


def truncate_message(message: str | None, max_length: int = _DEFAULT_MAX_MESSAGE_LENGTH) -> str:
    """Truncate message bodies for log lines, appending ... when cut."""
    if message is None:
        return ""
    if len(message) > max_length:
        return message[:max_length] + "..."
    return message
