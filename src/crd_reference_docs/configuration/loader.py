"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from crd_reference_docs.reference_rendering.page_assembler import (
    DEFAULT_GENERATOR_LABEL,
    DEFAULT_REFERENCE_BASE,
)

from .runtime_settings import AppendixConfig, GeneratorSettings, OutputSettings, UpstreamSettings

DEFAULT_UPSTREAM_ROOT = "ext/kube-mcp"
DEFAULT_CRD_DIR = "manifests/base/crds"
DEFAULT_CRD_PATTERN = "*-crd.yaml"
DEFAULT_EXAMPLES_FILE = "examples/echo-server/manifests/example-resources.yaml"
DEFAULT_OUTPUT_DIR = "src/content/docs/reference"
DEFAULT_PAGE_EXTENSION = ".mdx"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(
    config_path: Path | str | None = None, *, root: Path | str | None = None
) -> GeneratorSettings:
    """Load and validate the generator configuration.

    Args:
      config_path: YAML configuration file. When omitted, built-in defaults are used.
      root: Base directory for relative paths when no configuration file is given.
        Defaults to the current working directory.

    Returns:
      The validated settings with every path resolved.

    Raises:
      ConfigurationError: If the file is missing, unparsable or invalid.
    """
    if config_path is None:
        base_path = Path(root) if root is not None else Path.cwd()
        return _build_settings({}, base_path=base_path.resolve(), path=None)

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent if root is None else Path(root).resolve()
    return _build_settings(parsed, base_path=base_path, path=path.resolve())


def _build_settings(
    parsed: Mapping[str, Any], *, base_path: Path, path: Path | None
) -> GeneratorSettings:
    return GeneratorSettings(
        path=path,
        upstream=_parse_upstream_section(parsed.get("upstream"), base_path),
        output=_parse_output_section(parsed.get("output"), base_path),
        appendices=_parse_appendices_section(parsed.get("appendices"), base_path),
    )


def _parse_upstream_section(value: Any, base_path: Path) -> UpstreamSettings:
    section = _optional_mapping(value, "upstream")
    upstream_root = _resolve_path(
        base_path, _string_or_default(section, "root", DEFAULT_UPSTREAM_ROOT, "upstream")
    )
    crd_dir = _resolve_path(
        upstream_root, _string_or_default(section, "crd_dir", DEFAULT_CRD_DIR, "upstream")
    )
    crd_pattern = _string_or_default(section, "crd_pattern", DEFAULT_CRD_PATTERN, "upstream")

    if "examples_file" in section and section["examples_file"] is None:
        examples_file = None
    else:
        examples_file = _resolve_path(
            upstream_root,
            _string_or_default(section, "examples_file", DEFAULT_EXAMPLES_FILE, "upstream"),
        )
    return UpstreamSettings(
        crd_dir=crd_dir,
        crd_pattern=crd_pattern,
        examples_file=examples_file,
    )


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    directory = _resolve_path(
        base_path, _string_or_default(section, "directory", DEFAULT_OUTPUT_DIR, "output")
    )
    extension = _string_or_default(section, "extension", DEFAULT_PAGE_EXTENSION, "output")
    if not extension.startswith("."):
        raise ConfigurationError("output.extension must start with '.'.")
    reference_base = _string_or_default(
        section, "reference_base", DEFAULT_REFERENCE_BASE, "output"
    )
    if not reference_base.startswith("/"):
        raise ConfigurationError("output.reference_base must start with '/'.")
    generator_label = _string_or_default(
        section, "generator_label", DEFAULT_GENERATOR_LABEL, "output"
    )
    return OutputSettings(
        directory=directory,
        extension=extension,
        reference_base=reference_base,
        generator_label=generator_label,
    )


def _parse_appendices_section(value: Any, base_path: Path) -> dict[str, AppendixConfig]:
    section = _optional_mapping(value, "appendices")
    appendices: dict[str, AppendixConfig] = {}
    for kind, raw_path in section.items():
        if not isinstance(kind, str) or not kind.strip():
            raise ConfigurationError("appendices keys must be resource kind names.")
        field_name = f"appendices.{kind}"
        appendix_path = _resolve_path(base_path, _require_non_empty_string(raw_path, field_name))
        if not appendix_path.is_file():
            raise ConfigurationError(f"Appendix file not found: {appendix_path}")
        key = kind.strip().lower()
        if key in appendices:
            raise ConfigurationError(f"Duplicate appendix for kind '{kind}'.")
        try:
            text = appendix_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(
                f"Failed to read appendix file {appendix_path}: {exc}"
            ) from exc
        appendices[key] = AppendixConfig(
            kind=kind.strip(),
            text=text,
            source_path=appendix_path,
        )
    return appendices


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _string_or_default(
    section: Mapping[str, Any], key: str, default: str, section_name: str
) -> str:
    value = section.get(key)
    if value is None:
        return default
    return _require_non_empty_string(value, f"{section_name}.{key}")


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
