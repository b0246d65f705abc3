"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from crd_reference_docs.cli import main


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_crd_directory_returns_error_status(tmp_path: Path, capsys) -> None:
    exit_code = main(["generate", "--root", str(tmp_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "CRD directory not found" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_file_returns_error_status(tmp_path: Path, capsys) -> None:
    exit_code = main(["generate", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err


def test_undecodable_crd_file_returns_error_status(tmp_path: Path, capsys) -> None:
    crd_dir = tmp_path / "ext" / "kube-mcp" / "manifests" / "base" / "crds"
    crd_dir.mkdir(parents=True)
    crd_path = crd_dir / "mcptool-crd.yaml"
    crd_path.write_bytes(b"spec:\n  group: \xff\n")

    exit_code = main(["generate", "--root", str(tmp_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read CRD file" in captured.err
    assert str(crd_path) in captured.err
    assert "Traceback" not in captured.err
