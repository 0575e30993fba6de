# -*- coding: utf-8 -*-
"""TemplateEngine: {{variable}} substitution for message bodies.

Pure text processing; no I/O. Missing variables never fail processing: they are
replaced by an empty string and reported with a warning log event.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any, Optional

import structlog

from pinapp_notify.exceptions import InvalidArgumentError

_VARIABLE_PATTERN = re.compile(r"\{\{\s*([A-Za-z0-9_]+)\s*\}\}")
_MISSING_VARIABLE_REPLACEMENT = ""


class TemplateEngine:
    """Replaces {{name}} placeholders with values from a variables mapping.

    Replacement text is inserted literally and never re-expanded, so values that
    themselves look like placeholders are delivered as-is.
    """

    def __init__(
        self,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def process(self, template: str, variables: Optional[Mapping[str, Any]]) -> str:
        """Return template with every placeholder replaced.

        Args:
            template: Text that may contain {{name}} placeholders.
            variables: Replacement values. None means "no template context" and returns
                the template unchanged; an empty mapping replaces every placeholder with "".

        Raises:
            InvalidArgumentError: If template is None.
        """
        if template is None:
            raise InvalidArgumentError("template must not be None")
        if variables is None:
            self._logger.debug("template_no_context")
            return template
        if not template.strip():
            self._logger.debug("template_blank")
            return template

        replaced = 0

        def _replace(match: re.Match[str]) -> str:
            nonlocal replaced
            replaced += 1
            name = match.group(1)
            if name not in variables:
                self._logger.warning("template_variable_missing", variable=name)
                return _MISSING_VARIABLE_REPLACEMENT
            value = variables[name]
            return "" if value is None else str(value)

        result = _VARIABLE_PATTERN.sub(_replace, template)
        self._logger.debug(
            "template_processed",
            template_variables_count=len(variables),
            template_replacements=replaced,
        )
        return result

    @staticmethod
    def has_variables(template: Optional[str]) -> bool:
        """True if template contains at least one well-formed {{name}} placeholder."""
        if not template or not template.strip():
            return False
        return _VARIABLE_PATTERN.search(template) is not None

    @staticmethod
    def extract_variables(template: Optional[str]) -> set[str]:
        """Return the distinct placeholder names found in template."""
        if not template or not template.strip():
            return set()
        return {match.group(1) for match in _VARIABLE_PATTERN.finditer(template)}
