"""Schema parsing service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .schema_models import NO_DEFAULT, SchemaNode


class SchemaError(Exception):
    """Raised for schema parsing failures."""


def parse_schema_node(raw: Any, *, location: str = "#") -> SchemaNode:
    """Convert a raw schema mapping into an immutable SchemaNode tree.

    Args:
      raw: Mapping produced by a YAML or JSON loader.
      location: Breadcrumb of `raw` used in error messages.

    Returns:
      The parsed root node.

    Raises:
      SchemaError: If a node is not a mapping or a node is reachable from itself.
    """
    return _parse_node(raw, location=location, active=set())


def _parse_node(raw: Any, *, location: str, active: set[int]) -> SchemaNode:
    if not isinstance(raw, Mapping):
        raise SchemaError(f"Schema node at {location} must be a mapping.")

    marker = id(raw)
    if marker in active:
        raise SchemaError(f"Cyclic schema reference detected at {location}.")
    active.add(marker)
    try:
        return _build_node(raw, location=location, active=active)
    finally:
        active.discard(marker)


def _build_node(raw: Mapping[str, Any], *, location: str, active: set[int]) -> SchemaNode:
    properties = _parse_properties(raw.get("properties"), location=location, active=active)

    items_raw = raw.get("items")
    items = (
        _parse_node(items_raw, location=f"{location}[]", active=active)
        if isinstance(items_raw, Mapping)
        else None
    )

    additional_raw = raw.get("additionalProperties")
    additional_properties: bool | SchemaNode | None
    if isinstance(additional_raw, bool):
        additional_properties = additional_raw
    elif isinstance(additional_raw, Mapping):
        additional_properties = _parse_node(
            additional_raw, location=f"{location}{{}}", active=active
        )
    else:
        additional_properties = None

    one_of = _parse_sequence(raw.get("oneOf"), location=f"{location}<oneOf>", active=active)
    any_of = _parse_sequence(raw.get("anyOf"), location=f"{location}<anyOf>", active=active)
    all_of = _parse_sequence(raw.get("allOf"), location=f"{location}<allOf>", active=active)

    return SchemaNode(
        type=_optional_string(raw.get("type")),
        description=_optional_string(raw.get("description")),
        enum=_as_tuple(raw.get("enum")),
        required=frozenset(
            name for name in _as_tuple(raw.get("required")) if isinstance(name, str)
        ),
        properties=properties,
        items=items,
        additional_properties=additional_properties,
        one_of=one_of,
        any_of=any_of,
        all_of=all_of,
        format=_optional_string(raw.get("format")),
        default=raw["default"] if "default" in raw else NO_DEFAULT,
    )


def _parse_properties(
    value: Any, *, location: str, active: set[int]
) -> dict[str, SchemaNode]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SchemaError(f"Schema properties at {location} must be a mapping.")
    properties: dict[str, SchemaNode] = {}
    for name, child in value.items():
        child_location = f"{location}.{name}"
        properties[str(name)] = _parse_node(child, location=child_location, active=active)
    return properties


def _parse_sequence(value: Any, *, location: str, active: set[int]) -> tuple[SchemaNode, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise SchemaError(f"Schema combinator at {location} must be a list.")
    return tuple(
        _parse_node(member, location=f"{location}[{index}]", active=active)
        for index, member in enumerate(value)
    )


def _as_tuple(value: Any) -> tuple[Any, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return ()


def _optional_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None
