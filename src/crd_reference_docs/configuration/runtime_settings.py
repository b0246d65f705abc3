"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class UpstreamSettings:
    """Locations of the read-only upstream CRD sources."""

    crd_dir: Path
    crd_pattern: str
    examples_file: Path | None


@dataclass(frozen=True)
class OutputSettings:
    """Destination and labelling of generated reference pages."""

    directory: Path
    extension: str
    reference_base: str
    generator_label: str

    def page_path(self, slug: str) -> Path:
        return self.directory / f"{slug}{self.extension}"


@dataclass(frozen=True)
class AppendixConfig:
    """Static Markdown appended to one resource kind's page."""

    kind: str
    text: str
    source_path: Path


@dataclass(frozen=True)
class GeneratorSettings:
    """Top-level configuration aggregate."""

    path: Path | None
    upstream: UpstreamSettings
    output: OutputSettings
    appendices: Mapping[str, AppendixConfig] = field(default_factory=dict)

    def appendix_for(self, kind: str) -> str | None:
        appendix = self.appendices.get(kind.lower())
        return appendix.text if appendix else None
