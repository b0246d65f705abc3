"""Schema parsing service tests."""

from __future__ import annotations

import pytest
import yaml
from crd_reference_docs.schema_management.schema_models import NO_DEFAULT, SchemaNode
from crd_reference_docs.schema_management.schema_projection import (
    SchemaError,
    parse_schema_node,
)


def test_parses_nested_properties_in_source_order() -> None:
    node = parse_schema_node(
        {
            "type": "object",
            "required": ["spec"],
            "properties": {
                "spec": {
                    "type": "object",
                    "properties": {"zeta": {"type": "string"}, "alpha": {"type": "integer"}},
                },
                "status": {"type": "object"},
            },
        }
    )

    assert list(node.properties) == ["spec", "status"]
    assert list(node.properties["spec"].properties) == ["zeta", "alpha"]
    assert node.required == frozenset({"spec"})


def test_additional_properties_keeps_boolean_and_schema_variants_apart() -> None:
    flag = parse_schema_node({"type": "object", "additionalProperties": True})
    nested = parse_schema_node({"type": "object", "additionalProperties": {"type": "string"}})
    absent = parse_schema_node({"type": "object"})

    assert flag.additional_properties is True
    assert isinstance(nested.additional_properties, SchemaNode)
    assert nested.additional_properties.type == "string"
    assert absent.additional_properties is None


def test_explicit_null_default_differs_from_missing_default() -> None:
    with_null = parse_schema_node({"type": "string", "default": None})
    without = parse_schema_node({"type": "string"})

    assert with_null.has_default is True
    assert with_null.default is None
    assert without.default is NO_DEFAULT
    assert without.has_default is False


def test_combinators_and_items_are_parsed() -> None:
    node = parse_schema_node(
        {
            "type": "array",
            "items": {"oneOf": [{"type": "string"}, {"type": "integer"}]},
        }
    )

    assert node.items is not None
    assert [member.type for member in node.items.one_of] == ["string", "integer"]


def test_shared_yaml_alias_is_accepted() -> None:
    raw = yaml.safe_load(
        """
type: object
properties:
  primary: &endpoint
    type: object
    properties:
      host: {type: string}
  fallback: *endpoint
"""
    )

    node = parse_schema_node(raw)

    assert node.properties["primary"] == node.properties["fallback"]


def test_cyclic_yaml_alias_raises_schema_error() -> None:
    raw = yaml.safe_load(
        """
root: &node
  type: object
  properties:
    child: *node
"""
    )["root"]

    with pytest.raises(SchemaError, match="Cyclic schema reference"):
        parse_schema_node(raw)


def test_cycle_through_items_is_detected() -> None:
    raw: dict = {"type": "array"}
    raw["items"] = raw

    with pytest.raises(SchemaError, match=r"#\[\]"):
        parse_schema_node(raw)


def test_non_mapping_property_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match=r"#\.name must be a mapping"):
        parse_schema_node({"type": "object", "properties": {"name": "string"}})


def test_non_mapping_root_raises_schema_error() -> None:
    with pytest.raises(SchemaError):
        parse_schema_node(["not", "a", "schema"])
