"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final


class _NoDefault:
    """Marker type for schema nodes that declare no default value."""

    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Final = _NoDefault()


@dataclass(frozen=True)
class SchemaNode:  # pylint: disable=too-many-instance-attributes
    """One node of an OpenAPI v3 schema tree describing a field or the document root.

    `additional_properties` is either a boolean flag, a nested value schema for
    free-form maps, or None when the source omits it.
    """

    type: str | None = None
    description: str | None = None
    enum: tuple[Any, ...] = ()
    required: frozenset[str] = frozenset()
    properties: Mapping[str, SchemaNode] = field(default_factory=dict)
    items: SchemaNode | None = None
    additional_properties: bool | SchemaNode | None = None
    one_of: tuple[SchemaNode, ...] = ()
    any_of: tuple[SchemaNode, ...] = ()
    all_of: tuple[SchemaNode, ...] = ()
    format: str | None = None
    default: Any = NO_DEFAULT

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    def is_expandable_object(self) -> bool:
        """Return True when the node is an object with at least one named property."""
        return self.type == "object" and bool(self.properties)
