"""Example manifest reading service."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_DOCUMENT_BOUNDARY = re.compile(r"^(?P<marker>---|\.\.\.)(?:[ \t]+(?P<rest>.*))?$")


def load_examples_by_kind(examples_path: Path | None) -> dict[str, str]:
    """Map lowercased resource kinds to the verbatim text of their first example.

    A missing or undecodable file yields no examples. Candidates that fail to
    parse, are not mappings, or carry no string `kind` are discarded; later
    candidates for an already seen kind are ignored.
    """
    if examples_path is None:
        return {}
    try:
        text = examples_path.read_bytes().decode("utf-8")
    except FileNotFoundError:
        logger.debug("examples file %s not found; rendering without examples", examples_path)
        return {}
    except UnicodeDecodeError as exc:
        logger.debug("examples file %s is not valid UTF-8; ignoring it: %s", examples_path, exc)
        return {}

    examples: dict[str, str] = {}
    for index, chunk in enumerate(split_yaml_documents(text)):
        try:
            parsed = yaml.safe_load(chunk)
        except yaml.YAMLError as exc:
            logger.debug("discarding example candidate %d in %s: %s", index, examples_path, exc)
            continue
        if not isinstance(parsed, Mapping):
            continue
        kind = parsed.get("kind")
        if not isinstance(kind, str) or not kind:
            logger.debug("discarding example candidate %d in %s without kind", index, examples_path)
            continue
        examples.setdefault(kind.lower(), chunk)
    return examples


def split_yaml_documents(text: str) -> list[str]:
    """Split a YAML stream into trimmed document texts on `---` and `...` marker lines.

    Line endings inside a document are kept as they appear in `text`. Comments
    and tags trailing a `---` marker are dropped; other content on the marker
    line starts the next document.
    """
    chunks: list[str] = []
    current: list[str] = []
    for line in text.splitlines(keepends=True):
        boundary = _DOCUMENT_BOUNDARY.match(line.rstrip("\r\n"))
        if boundary is None:
            current.append(line)
            continue
        chunks.append("".join(current))
        current = []
        rest = boundary.group("rest") or ""
        if boundary.group("marker") == "---" and rest and not rest.startswith(("#", "!")):
            current.append(line[len("---") :].lstrip(" \t"))
    chunks.append("".join(current))
    return [chunk.strip() for chunk in chunks if chunk.strip()]
