"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "crd-docs.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for crd-reference-docs.
# Every key is <OPTIONAL>; omitted keys fall back to the defaults shown here.
# Relative paths resolve against the directory holding this file.

upstream:
  # Checkout of the upstream operator repository.
  root: "ext/kube-mcp"
  # CRD directory and file pattern, relative to upstream.root.
  crd_dir: "manifests/base/crds"
  crd_pattern: "*-crd.yaml"
  # Multi-document YAML of example resources, relative to upstream.root.
  # Set to null to render pages without examples.
  examples_file: "examples/echo-server/manifests/example-resources.yaml"

output:
  directory: "src/content/docs/reference"
  extension: ".mdx"
  # Site path under which reference pages are published.
  reference_base: "/reference"
  # Command named in the "do not edit" notice of every page.
  generator_label: "crd-reference-docs generate"

# Static Markdown appended to the page of a resource kind.
appendices: {}
#   MCPServer: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the generator configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
