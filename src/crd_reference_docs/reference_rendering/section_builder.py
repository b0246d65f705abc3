"""Recursive schema section builder."""

from __future__ import annotations

from collections.abc import Iterator

from crd_reference_docs.schema_management.schema_models import SchemaNode

from .cell_text import escape_cell, normalize_description
from .type_labels import format_default, format_type

ROOT_PATH = "#"
EMPTY_CELL = "—"
NO_PROPERTIES_PLACEHOLDER = "_No direct properties at this level._"
TABLE_HEADER = (
    "| Field | Type | Required | Description | Default |",
    "| --- | --- | --- | --- | --- |",
)


def build_section(path: str, node: SchemaNode) -> str:
    """Render `node` and its expandable descendants as nested Markdown sections.

    Args:
      path: Breadcrumb of the node, `#` for the document root, `#.spec.ports[]`
        for the element shape of an array field.
      node: Schema node to document.

    Returns:
      Heading, optional description, property table (or placeholder) and the
      child sections, separated by blank lines.
    """
    blocks = [f"## {heading_for_path(path)}"]
    if node.description:
        description = normalize_description(node.description)
        if description:
            blocks.append(description)

    if node.properties:
        rows = [
            _property_row(name, child, node.required) for name, child in node.properties.items()
        ]
        blocks.append("\n".join((*TABLE_HEADER, *rows)))
    else:
        blocks.append(NO_PROPERTIES_PLACEHOLDER)

    for child_path, child in _expandable_children(path, node):
        blocks.append(build_section(child_path, child))
    return "\n\n".join(blocks)


def heading_for_path(path: str) -> str:
    if path == ROOT_PATH:
        return "Root"
    if path.startswith(f"{ROOT_PATH}."):
        return path[len(ROOT_PATH) + 1 :]
    return path.removeprefix(ROOT_PATH)


def _property_row(name: str, child: SchemaNode, required: frozenset[str]) -> str:
    description = normalize_description(child.description or "")
    default = format_default(child.default)
    cells = (
        f"`{name}`",
        f"`{escape_cell(format_type(child))}`",
        "Yes" if name in required else "No",
        escape_cell(description or EMPTY_CELL),
        escape_cell(default or EMPTY_CELL),
    )
    return f"| {' | '.join(cells)} |"


def _expandable_children(path: str, node: SchemaNode) -> Iterator[tuple[str, SchemaNode]]:
    for name, child in node.properties.items():
        child_path = f"{path}.{name}"
        if child.is_expandable_object():
            yield child_path, child
        elif child.type == "array" and child.items and child.items.is_expandable_object():
            yield f"{child_path}[]", child.items
