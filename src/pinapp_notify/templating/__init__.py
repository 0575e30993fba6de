"""Message templating."""

from pinapp_notify.templating.template_engine import TemplateEngine

__all__ = ["TemplateEngine"]
