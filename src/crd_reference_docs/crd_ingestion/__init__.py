"""CRD ingestion exports."""

from .crd_models import ResourceDocument
from .crd_reader import ResourceDefinitionError, discover_crd_files, read_resource_documents
from .example_reader import load_examples_by_kind, split_yaml_documents

__all__ = [
    "ResourceDefinitionError",
    "ResourceDocument",
    "discover_crd_files",
    "load_examples_by_kind",
    "read_resource_documents",
    "split_yaml_documents",
]
