"""CRD ingestion entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from crd_reference_docs.schema_management.schema_models import SchemaNode


@dataclass(frozen=True)
class ResourceDocument:
    """One resource kind ready to be rendered as a reference page."""

    kind: str
    group: str
    version: str
    schema: SchemaNode
    source_path: Path
    example: str | None = None

    @property
    def slug(self) -> str:
        return self.kind.lower()

    @property
    def api_version(self) -> str:
        return f"{self.group}/{self.version}"
