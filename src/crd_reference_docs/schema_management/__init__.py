"""Schema management exports."""

from .schema_models import NO_DEFAULT, SchemaNode
from .schema_projection import SchemaError, parse_schema_node

__all__ = [
    "NO_DEFAULT",
    "SchemaNode",
    "SchemaError",
    "parse_schema_node",
]
