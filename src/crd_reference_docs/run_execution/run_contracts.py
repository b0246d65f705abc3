"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class PageStatus(str, Enum):
    """What happened to one reference page during a run."""

    WRITTEN = "written"
    UNCHANGED = "unchanged"
    STALE = "stale"
    MISSING = "missing"


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run."""

    config_path: str | None = None
    root: str | None = None
    output_dir: str | None = None
    check: bool = False


@dataclass(frozen=True)
class PageOutcome:
    """Result for one resource kind."""

    kind: str
    path: Path
    status: PageStatus


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed run."""

    pages: tuple[PageOutcome, ...]
    check: bool

    @property
    def drifted(self) -> tuple[PageOutcome, ...]:
        return tuple(
            page for page in self.pages if page.status in (PageStatus.STALE, PageStatus.MISSING)
        )
