"""Dependency injection."""

from pinapp_notify.DI.container import Container

__all__ = ["Container"]
