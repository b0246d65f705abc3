"""Reference rendering exports."""

from .cell_text import escape_cell, normalize_description
from .page_assembler import DEFAULT_GENERATOR_LABEL, render_reference_page
from .section_builder import build_section
from .type_labels import format_default, format_type

__all__ = [
    "DEFAULT_GENERATOR_LABEL",
    "build_section",
    "escape_cell",
    "format_default",
    "format_type",
    "normalize_description",
    "render_reference_page",
]
