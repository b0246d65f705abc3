"""Text helpers for Markdown table cells."""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")

# Applied in order; no replacement introduces a character matched by another step.
_CELL_REPLACEMENTS = (
    ("|", "\\|"),
    ("{", "&#123;"),
    ("}", "&#125;"),
    ("\n", "<br />"),
)


def normalize_description(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim both ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def escape_cell(text: str) -> str:
    """Make text safe to embed as one MDX table cell."""
    for needle, replacement in _CELL_REPLACEMENTS:
        text = text.replace(needle, replacement)
    return text
