# -*- coding: utf-8 -*-
"""Unit tests for TemplateEngine placeholder substitution."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from pinapp_notify.exceptions import InvalidArgumentError
from pinapp_notify.templating import TemplateEngine


@pytest.fixture
def engine(get_logger: Callable[[str], Any]) -> TemplateEngine:
    return TemplateEngine(get_logger=get_logger)


def test_process_replaces_known_variables(engine: TemplateEngine) -> None:
    assert engine.process("Hello {{name}}", {"name": "Sam"}) == "Hello Sam"


def test_process_tolerates_whitespace_inside_braces(engine: TemplateEngine) -> None:
    assert engine.process("Hi {{ name }}!", {"name": "Ana"}) == "Hi Ana!"


def test_process_replaces_repeated_placeholders(engine: TemplateEngine) -> None:
    assert engine.process("{{a}}-{{a}}-{{b}}", {"a": "1", "b": "2"}) == "1-1-2"


def test_process_with_missing_variable_uses_empty_string_and_warns(
    engine: TemplateEngine,
    logger: MagicMock,
) -> None:
    result = engine.process("Code {{otp}}", {})

    assert result == "Code "
    logger.warning.assert_any_call("template_variable_missing", variable="otp")


@pytest.mark.parametrize(
    "template",
    ["Hello {{name}}", "no placeholders", "", "   ", "{{broken", "{{ a }} and {{b}}"],
)
def test_process_without_context_returns_template_unchanged(
    engine: TemplateEngine,
    template: str,
) -> None:
    assert engine.process(template, None) == template


def test_process_with_empty_context_blanks_every_placeholder(engine: TemplateEngine) -> None:
    assert engine.process("{{a}}x{{ b }}y", {}) == "xy"


def test_process_leaves_malformed_placeholders_alone(engine: TemplateEngine) -> None:
    assert engine.process("{{first name}} {name} {{ok}}", {"ok": "yes"}) == "{{first name}} {name} yes"


def test_process_renders_none_value_as_empty_and_non_strings_with_str(
    engine: TemplateEngine,
) -> None:
    assert engine.process("[{{a}}][{{n}}]", {"a": None, "n": 42}) == "[][42]"


def test_process_does_not_reexpand_substituted_values(engine: TemplateEngine) -> None:
    assert engine.process("{{a}}", {"a": "{{b}}", "b": "nope"}) == "{{b}}"


def test_process_is_idempotent_once_placeholders_are_gone(engine: TemplateEngine) -> None:
    variables = {"name": "Sam", "code": "42"}
    once = engine.process("Hi {{name}}, code {{code}}", variables)

    assert engine.process(once, variables) == once


def test_process_raises_when_template_is_none(engine: TemplateEngine) -> None:
    with pytest.raises(InvalidArgumentError):
        engine.process(None, {"a": "1"})  # type: ignore[arg-type]


def test_process_does_not_mutate_variables(engine: TemplateEngine) -> None:
    variables = {"name": "Sam"}
    engine.process("Hello {{name}} {{missing}}", variables)

    assert variables == {"name": "Sam"}


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        ("Hello {{name}}", True),
        ("Hello {{ name }}", True),
        ("Hello name", False),
        ("{{not valid}}", False),
        ("", False),
        (None, False),
    ],
)
def test_has_variables(template: str | None, expected: bool) -> None:
    assert TemplateEngine.has_variables(template) is expected


def test_extract_variables_returns_distinct_names() -> None:
    names = TemplateEngine.extract_variables("{{a}} {{ b }} {{a}} {c} {{d e}}")

    assert names == {"a", "b"}


@pytest.mark.parametrize("template", [None, "", "  "])
def test_extract_variables_of_blank_template_is_empty(template: str | None) -> None:
    assert TemplateEngine.extract_variables(template) == set()
