"""Run execution use-case service."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from crd_reference_docs.configuration import (
    ConfigurationError,
    GeneratorSettings,
    load_configuration,
)
from crd_reference_docs.crd_ingestion import (
    ResourceDefinitionError,
    ResourceDocument,
    discover_crd_files,
    load_examples_by_kind,
    read_resource_documents,
)
from crd_reference_docs.reference_rendering import render_reference_page

from .run_contracts import GenerationOutcome, GenerationRequest, PageOutcome, PageStatus

logger = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_reference_generation(request: GenerationRequest) -> GenerationOutcome:
    """Render one reference page per resource kind and write or check it.

    The run aborts on the first fatal input error; no pages are written when
    any CRD fails to load.
    """
    settings = _load_settings(request)
    documents = _load_resource_documents(settings)

    pages: list[PageOutcome] = []
    for document in documents:
        rendered = render_reference_page(
            document,
            appendix=settings.appendix_for(document.kind),
            generator_label=settings.output.generator_label,
            reference_base=settings.output.reference_base,
        )
        page_path = settings.output.page_path(document.slug)
        try:
            status = (
                _check_page(page_path, rendered)
                if request.check
                else _write_page(page_path, rendered)
            )
        except OSError as exc:
            raise RunExecutionError(f"Failed to process page {page_path}: {exc}") from exc
        logger.info("%s %s (%s)", status.value, page_path, document.kind)
        pages.append(PageOutcome(kind=document.kind, path=page_path, status=status))

    return GenerationOutcome(pages=tuple(pages), check=request.check)


def _load_settings(request: GenerationRequest) -> GeneratorSettings:
    try:
        settings = load_configuration(request.config_path, root=request.root)
    except (ConfigurationError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc
    if request.output_dir:
        output = dataclasses.replace(
            settings.output, directory=Path(request.output_dir).resolve()
        )
        settings = dataclasses.replace(settings, output=output)
    return settings


def _load_resource_documents(settings: GeneratorSettings) -> list[ResourceDocument]:
    upstream = settings.upstream
    try:
        examples_by_kind = load_examples_by_kind(upstream.examples_file)
        documents: list[ResourceDocument] = []
        for crd_path in discover_crd_files(upstream.crd_dir, upstream.crd_pattern):
            documents.extend(read_resource_documents(crd_path, examples_by_kind))
    except (ResourceDefinitionError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc

    seen: dict[str, ResourceDocument] = {}
    for document in documents:
        previous = seen.setdefault(document.slug, document)
        if previous is not document:
            raise RunExecutionError(
                f"Resource kind {document.kind} in {document.source_path} is already "
                f"defined in {previous.source_path}"
            )
    return documents


def _write_page(page_path: Path, rendered: str) -> PageStatus:
    content = rendered.encode("utf-8")
    if _read_existing(page_path) == content:
        return PageStatus.UNCHANGED
    page_path.parent.mkdir(parents=True, exist_ok=True)
    page_path.write_bytes(content)
    return PageStatus.WRITTEN


def _check_page(page_path: Path, rendered: str) -> PageStatus:
    existing = _read_existing(page_path)
    if existing is None:
        return PageStatus.MISSING
    return PageStatus.UNCHANGED if existing == rendered.encode("utf-8") else PageStatus.STALE


def _read_existing(page_path: Path) -> bytes | None:
    # Byte comparison; embedded examples may carry CRLF line endings.
    if not page_path.is_file():
        return None
    return page_path.read_bytes()
