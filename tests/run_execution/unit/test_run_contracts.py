"""Tests for run execution domain entities."""

from __future__ import annotations

from pathlib import Path

from crd_reference_docs.run_execution.run_contracts import (
    GenerationOutcome,
    GenerationRequest,
    PageOutcome,
    PageStatus,
)


def test_generation_request_defaults_to_write_mode() -> None:
    request = GenerationRequest()

    assert request.check is False
    assert request.config_path is None
    assert request.output_dir is None


def test_outcome_reports_stale_and_missing_pages_as_drifted() -> None:
    outcome = GenerationOutcome(
        pages=(
            PageOutcome(kind="MCPServer", path=Path("mcpserver.mdx"), status=PageStatus.UNCHANGED),
            PageOutcome(kind="MCPTool", path=Path("mcptool.mdx"), status=PageStatus.STALE),
            PageOutcome(kind="MCPPrompt", path=Path("mcpprompt.mdx"), status=PageStatus.MISSING),
        ),
        check=True,
    )

    assert [page.kind for page in outcome.drifted] == ["MCPTool", "MCPPrompt"]


def test_written_pages_are_not_drift() -> None:
    outcome = GenerationOutcome(
        pages=(PageOutcome(kind="MCPTool", path=Path("mcptool.mdx"), status=PageStatus.WRITTEN),),
        check=False,
    )

    assert outcome.drifted == ()
