"""Type label and default formatting tests."""

from __future__ import annotations

import datetime

import pytest
from crd_reference_docs.reference_rendering.type_labels import format_default, format_type
from crd_reference_docs.schema_management.schema_models import NO_DEFAULT
from crd_reference_docs.schema_management.schema_projection import parse_schema_node


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ({"type": "string"}, "string"),
        ({}, "unknown"),
        ({"type": "string", "format": "date-time"}, "string [date-time]"),
        ({"type": "string", "enum": ["a", "b"]}, 'string ("a", "b")'),
        ({"type": "integer", "format": "int32", "enum": [1, 2]}, "integer [int32] (1, 2)"),
        ({"type": "array"}, "array"),
        ({"type": "array", "items": {"type": "string"}}, "array<string>"),
        (
            {"type": "array", "items": {"type": "array", "items": {"type": "integer"}}},
            "array<array<integer>>",
        ),
        ({"type": "object"}, "object"),
        ({"type": "object", "additionalProperties": True}, "object"),
        (
            {"type": "object", "additionalProperties": {"type": "string"}},
            "map<string, string>",
        ),
        ({"anyOf": [{"type": "integer"}, {"type": "string"}]}, "integer | string"),
        ({"allOf": [{"type": "object"}, {"type": "string"}]}, "object & string"),
    ],
)
def test_format_type_labels(raw: dict, expected: str) -> None:
    assert format_type(parse_schema_node(raw)) == expected


def test_one_of_takes_precedence_over_type() -> None:
    node = parse_schema_node(
        {"type": "object", "oneOf": [{"type": "string"}, {"type": "integer"}]}
    )

    assert format_type(node) == "string | integer"


def test_only_first_non_empty_combinator_applies() -> None:
    node = parse_schema_node(
        {
            "oneOf": [],
            "anyOf": [{"type": "boolean"}],
            "allOf": [{"type": "string"}],
        }
    )

    assert format_type(node) == "boolean"


def test_format_default_renders_compact_literals() -> None:
    assert format_default(NO_DEFAULT) == ""
    assert format_default(None) == "null"
    assert format_default(False) == "false"
    assert format_default("http") == '"http"'
    assert format_default({"port": 8080, "tls": True}) == '{"port":8080,"tls":true}'
    assert format_default(["a", "b"]) == '["a","b"]'


def test_format_default_falls_back_to_plain_string() -> None:
    value = datetime.date(2024, 1, 31)

    assert format_default(value) == "2024-01-31"


def test_format_default_handles_self_referencing_value() -> None:
    value: list = []
    value.append(value)

    assert format_default(value) == "[[...]]"


def test_non_finite_numbers_render_as_null() -> None:
    assert format_default(float("nan")) == "null"
    assert format_default(float("inf")) == "null"
    assert format_default({"ratio": float("-inf"), "values": [1.5, float("nan")]}) == (
        '{"ratio":null,"values":[1.5,null]}'
    )


def test_non_finite_enum_values_render_as_null() -> None:
    node = parse_schema_node({"type": "number", "enum": [0.5, float("nan")]})

    assert format_type(node) == "number (0.5, null)"
