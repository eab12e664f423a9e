"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-matcher.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for sdk-response-matcher.
# Every section is optional; remove the ones your setup does not need.

schemas:
  # Register the packaged response schemas (EstimateFee, DeclareContractResponse, ...).
  include_builtin: true
  # Replace registered schemas that share a name with a schema file entry.
  overwrite: false
  # Additional schema documents, resolved relative to this file.
  files:
    - "<OPTIONAL>"

report:
  # Directory for validation report workbooks written by `validate`.
  output_dir: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

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
