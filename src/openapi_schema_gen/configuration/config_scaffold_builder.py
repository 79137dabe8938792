"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "openapi-gen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for openapi-schema-gen.
# Replace every <REQUIRED> placeholder before running generate.
# Remove optional keys you do not need; the commented values are the defaults.

universe:
  # YAML/JSON type declaration file, relative to this configuration file.
  path: "<REQUIRED>"

output:
  path: "<REQUIRED>"
  # format: yaml  # yaml or json

generation:
  # Namespace of the generated artifact; never listed in its imports.
  # local_namespace: "<OPTIONAL>"
  # entry_marker: "+openapi-gen=true"
  # ref_prefix: "#/definitions/"
  # fail_fast: false

schema_library:
  # namespace: "github.com/go-openapi/spec"
  # alias: "spec"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration template with placeholders."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder generator configuration to the requested output path.

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
