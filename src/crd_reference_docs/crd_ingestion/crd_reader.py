"""CRD file reading service."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from crd_reference_docs.schema_management.schema_projection import SchemaError, parse_schema_node

from .crd_models import ResourceDocument

logger = logging.getLogger(__name__)


class ResourceDefinitionError(Exception):
    """Raised when a CRD file cannot be turned into a resource document."""


def discover_crd_files(crd_dir: Path, pattern: str) -> list[Path]:
    """Return CRD files in `crd_dir` matching `pattern`, sorted by name."""
    if not crd_dir.is_dir():
        raise ResourceDefinitionError(f"CRD directory not found: {crd_dir}")
    return sorted(path for path in crd_dir.glob(pattern) if path.is_file())


def read_resource_documents(
    crd_path: Path, examples_by_kind: Mapping[str, str] | None = None
) -> list[ResourceDocument]:
    """Read every resource kind defined in one CRD file.

    Documents without a string `spec.names.kind` are skipped.

    Raises:
      ResourceDefinitionError: If the file cannot be read or parsed, or a kind has
        no `openAPIV3Schema` in its first version.
    """
    examples = examples_by_kind or {}
    logger.debug("reading CRD file %s", crd_path)
    try:
        text = crd_path.read_text(encoding="utf-8")
        raw_documents = list(yaml.safe_load_all(text))
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceDefinitionError(f"Failed to read CRD file {crd_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ResourceDefinitionError(f"Failed to parse CRD file {crd_path}: {exc}") from exc

    return list(_iter_resource_documents(raw_documents, crd_path, examples))


def _iter_resource_documents(
    raw_documents: Sequence[Any], crd_path: Path, examples: Mapping[str, str]
) -> Iterator[ResourceDocument]:
    for index, raw in enumerate(raw_documents):
        spec = _mapping(_mapping(raw).get("spec"))
        kind = _string(_mapping(spec.get("names")).get("kind"))
        if not kind:
            logger.debug("skipping document %d in %s without spec.names.kind", index, crd_path)
            continue

        first_version = _first_version(spec.get("versions"))
        schema_raw = _mapping(first_version.get("schema")).get("openAPIV3Schema")
        if schema_raw is None:
            raise ResourceDefinitionError(f"Missing openAPIV3Schema for {kind} in {crd_path}")
        try:
            schema = parse_schema_node(schema_raw)
        except SchemaError as exc:
            raise ResourceDefinitionError(
                f"Invalid schema for {kind} in {crd_path}: {exc}"
            ) from exc

        yield ResourceDocument(
            kind=kind,
            group=_string(spec.get("group")),
            version=_string(first_version.get("name")),
            schema=schema,
            source_path=crd_path,
            example=examples.get(kind.lower()),
        )


def _first_version(value: Any) -> Mapping[str, Any]:
    if isinstance(value, Sequence) and not isinstance(value, str) and value:
        return _mapping(value[0])
    return {}


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""
