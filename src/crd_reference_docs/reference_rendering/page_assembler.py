"""Reference page assembly."""

from __future__ import annotations

from crd_reference_docs.crd_ingestion.crd_models import ResourceDocument

from .section_builder import ROOT_PATH, build_section

DEFAULT_GENERATOR_LABEL = "crd-reference-docs generate"
DEFAULT_REFERENCE_BASE = "/reference"


def render_reference_page(
    document: ResourceDocument,
    *,
    appendix: str | None = None,
    generator_label: str = DEFAULT_GENERATOR_LABEL,
    reference_base: str = DEFAULT_REFERENCE_BASE,
) -> str:
    """Render the complete MDX page for one resource kind.

    The page holds, in order: front matter, the generated-file notice, the
    identity list, the schema sections, the example block when the kind has an
    example, and the appendix when one is configured. The result always ends
    with a single newline.
    """
    kind = document.kind
    reference_path = f"{reference_base.rstrip('/')}/{document.slug}/"
    sections = [
        "---",
        f"title: {kind}",
        f"description: Auto-generated CRD schema reference for {kind}",
        "---",
        "",
        f"> This page is auto-generated by `{generator_label}`. Do not edit manually.",
        "",
        f"- **Kind:** `{kind}`",
        f"- **API Group:** `{document.group}`",
        f"- **Version:** `{document.version}`",
        f"- **apiVersion:** `{document.api_version}`",
        f"- **Reference Slug:** `{reference_path}`",
        "",
        "# Schema",
        "",
        build_section(ROOT_PATH, document.schema),
    ]

    if document.example:
        sections.extend(["", "# Example", "", "```yaml", document.example, "```"])

    if appendix and appendix.strip():
        sections.extend(["", appendix.strip()])

    return "\n".join(sections) + "\n"
