"""Type and default-value labels for schema table rows."""

from __future__ import annotations

import json
import math
from typing import Any

from crd_reference_docs.schema_management.schema_models import NO_DEFAULT, SchemaNode


def format_type(node: SchemaNode) -> str:
    """Return the human-readable type label rendered in the Type column.

    Combinators win over `type`, checked in the order oneOf, anyOf, allOf;
    only the first non-empty one is used.
    """
    if node.one_of:
        return " | ".join(format_type(member) for member in node.one_of)
    if node.any_of:
        return " | ".join(format_type(member) for member in node.any_of)
    if node.all_of:
        return " & ".join(format_type(member) for member in node.all_of)

    if node.type == "array":
        if node.items is None:
            return "array"
        return f"array<{format_type(node.items)}>"

    if node.type == "object":
        if isinstance(node.additional_properties, SchemaNode):
            return f"map<string, {format_type(node.additional_properties)}>"
        return "object"

    base_type = node.type or "unknown"
    format_suffix = f" [{node.format}]" if node.format else ""
    enum_suffix = (
        f" ({', '.join(_json_literal(value) for value in node.enum)})" if node.enum else ""
    )
    return f"{base_type}{format_suffix}{enum_suffix}"


def format_default(value: Any) -> str:
    """Render a default value as a compact literal, or an empty string when absent."""
    if value is NO_DEFAULT:
        return ""
    return _json_literal(value)


def _json_literal(value: Any) -> str:
    try:
        return json.dumps(
            _finite(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError):
        return str(value)


def _finite(value: Any, active: frozenset[int] = frozenset()) -> Any:
    """Replace NaN and infinities with None, as JavaScript JSON does."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if not isinstance(value, list | tuple | dict):
        return value
    if id(value) in active:
        raise ValueError("Circular reference detected")
    nested = active | {id(value)}
    if isinstance(value, dict):
        return {key: _finite(item, nested) for key, item in value.items()}
    return [_finite(item, nested) for item in value]
